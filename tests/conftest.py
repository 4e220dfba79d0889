import os
import tempfile
from datetime import datetime

# Avant tout import de app.* : la base "globale" de l'app pointe vers un fichier jetable
_TMP_DIR = tempfile.mkdtemp(prefix="golf-club-tests-")
os.environ.setdefault("ENV", "test")
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_TMP_DIR}/app.db")

import pytest
from sqlalchemy.pool import NullPool

from app.db.session import build_engine, build_session_factory, init_db
from app.db.repositories.games import GameRepository
from app.db.repositories.players import PlayerRepository
from app.features.games.schemas import GameIn
from app.features.games.services import CascadeMode, GameService
from app.features.players.schemas import PlayerIn
from app.features.players.services import PlayerService


@pytest.fixture
async def engine(tmp_path):
    eng = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'golf.db'}", poolclass=NullPool)
    await init_db(eng)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as s:
        yield s


def make_services(session, *, cascade_mode=CascadeMode.ANY, id_retries=5):
    player_repo = PlayerRepository(session)
    game_repo = GameRepository(session)
    game_svc = GameService(game_repo, player_repo, cascade_mode=cascade_mode, id_retries=id_retries)
    player_svc = PlayerService(player_repo, game_repo, game_svc, id_retries=id_retries)
    return player_svc, game_svc


@pytest.fixture
def services(session):
    return make_services(session)


@pytest.fixture
def player_svc(services):
    return services[0]


@pytest.fixture
def game_svc(services):
    return services[1]


def player_in(firstname="Jane", surname="Smith", email=None, gender="F", handicap=12.5) -> PlayerIn:
    email = email or f"{firstname.lower()}.{surname.lower()}@club.com"
    return PlayerIn(firstname=firstname, surname=surname, email=email, gender=gender, handicap=handicap)


def game_in(captain=1, player2=2, player3=3, player4=4, game_time=datetime(2029, 1, 30, 15, 0)) -> GameIn:
    return GameIn(captain=captain, player2=player2, player3=player3, player4=player4, game_time=game_time)


@pytest.fixture
async def four_players(player_svc):
    """Joueurs 1..4 : Jane Smith, John Doe, Ann Lee, Bob Ray."""
    for first, last, gender, hcp in (
        ("Jane", "Smith", "F", 12.5),
        ("John", "Doe", "M", 20),
        ("Ann", "Lee", "F", 7),
        ("Bob", "Ray", "M", 30),
    ):
        message = await player_svc.create(player_in(first, last, gender=gender, handicap=hcp))
        assert message.endswith("added.")
    return [1, 2, 3, 4]
