from datetime import datetime

import pytest
from sqlmodel import select

from app.db.models.games import Game
from app.db.models.players import Player
from app.domain.services import ConflictError
from app.domain.sorting import SortDirection

from conftest import game_in, make_services, player_in


async def _count(session_factory, model):
    async with session_factory() as s:
        return len((await s.exec(select(model))).all())


# -----------------------------
# Create
# -----------------------------

async def test_create_assigns_sequential_ids(player_svc):
    assert await player_svc.create(player_in("Jane", "Smith")) == "Jane Smith added."
    assert await player_svc.create(player_in("John", "Doe")) == "John Doe added."

    players = await player_svc.get_all()
    assert sorted(p.id for p in players) == [1, 2]


async def test_id_continues_from_max_not_count(player_svc):
    await player_svc.create(player_in("Jane", "Smith"))
    await player_svc.create(player_in("John", "Doe"))
    await player_svc.create(player_in("Ann", "Lee"))
    await player_svc.delete(2)

    await player_svc.create(player_in("Bob", "Ray"))
    bob = [p for p in await player_svc.get_all() if p.firstname == "Bob"][0]
    assert bob.id == 4


@pytest.mark.parametrize(
    "payload, message",
    [
        (player_in(firstname="J0hn"), "Incorrect firstname or surname - max length 10 each."),
        (player_in(surname="Abcdefghijk"), "Incorrect firstname or surname - max length 10 each."),
        (player_in(firstname=""), "Incorrect firstname or surname - max length 10 each."),
        (player_in(email="not-an-email"), "Invalid email address - max length 30."),
        (player_in(email="a" * 22 + "@club.com"), "Invalid email address - max length 30."),
        (player_in(gender=""), "Select gender."),
        (player_in(gender="X"), "Gender must be either M, F or O."),
        (player_in(handicap=0.0), "Select handicap."),
        (player_in(handicap=51), "Handicap must be between 1 and 50."),
    ],
)
async def test_create_rejections(player_svc, session_factory, payload, message):
    assert await player_svc.create(payload) == message
    assert await _count(session_factory, Player) == 0


async def test_first_violated_rule_wins(player_svc):
    # nom ET email ET genre invalides : seul le 1er message remonte
    payload = player_in(firstname="J0hn", email="bad", gender="")
    assert await player_svc.create(payload) == "Incorrect firstname or surname - max length 10 each."


async def test_duplicate_email_rejected(player_svc, session_factory):
    await player_svc.create(player_in("Jane", "Smith", email="jane@club.com"))
    message = await player_svc.create(player_in("Janet", "Smith", email="jane@club.com"))
    assert message == "A player with this email already exists."
    assert await _count(session_factory, Player) == 1


async def test_surname_limit_is_configurable(session):
    player_svc, _ = make_services(session)
    player_svc.surname_max_length = 20
    assert await player_svc.create(player_in("Jane", "Abcdefghijklmno")) == "Jane Abcdefghijklmno added."


async def test_name_rejection_reports_configured_limit(session):
    player_svc, _ = make_services(session)
    player_svc.surname_max_length = 20
    message = await player_svc.create(player_in("Jane", "A" * 21, email="jane.long@club.com"))
    assert message == "Incorrect firstname or surname - max length 20 each."


# -----------------------------
# Concurrency : collision d'id
# -----------------------------

async def test_create_retries_when_id_collides(session_factory):
    async with session_factory() as s1, session_factory() as s2:
        svc_a, _ = make_services(s1)
        svc_b, _ = make_services(s2)

        # A lit le max avant que B n'insère : A va proposer le même id que B
        calls = []
        real_next_id = svc_a.next_id

        async def stale_next_id():
            calls.append(1)
            if len(calls) == 1:
                return 1
            return await real_next_id()

        svc_a.next_id = stale_next_id

        assert await svc_b.create(player_in("Jane", "Smith")) == "Jane Smith added."
        assert await svc_a.create(player_in("John", "Doe")) == "John Doe added."
        assert len(calls) == 2

    async with session_factory() as s:
        ids = sorted(p.id for p in (await s.exec(select(Player))).all())
    assert ids == [1, 2]


async def test_create_gives_up_after_retries(session_factory):
    async with session_factory() as s1, session_factory() as s2:
        svc_a, _ = make_services(s1, id_retries=3)
        svc_b, _ = make_services(s2)
        await svc_b.create(player_in("Jane", "Smith"))

        async def always_one():
            return 1

        svc_a.next_id = always_one
        with pytest.raises(ConflictError):
            await svc_a.create(player_in("John", "Doe"))


# -----------------------------
# Edit
# -----------------------------

async def test_edit_recomputes_cards_of_player_games_only(player_svc, game_svc, four_players, session_factory):
    await player_svc.create(player_in("Tom", "Baker", gender="M", handicap=9))  # id 5

    await game_svc.create(game_in(1, 2, 3, 4, datetime(2029, 1, 30, 15, 0)))
    await game_svc.create(game_in(3, 1, 5, 4, datetime(2029, 1, 31, 10, 0)))
    await game_svc.create(game_in(3, 4, 5, 1, datetime(2029, 2, 1, 10, 0)))  # sans John (2)

    message = await player_svc.edit(2, player_in("John", "Doherty", email="john.doe@club.com", gender="M", handicap=20))
    assert message == "John Doherty updated."

    async with session_factory() as s:
        games = {g.id: g for g in (await s.exec(select(Game))).all()}
        john = await s.get(Player, 2)

    assert john.surname == "Doherty"
    assert "John Doherty" in games[1].game_card
    assert "Doherty" not in games[2].game_card
    assert "Doherty" not in games[3].game_card


async def test_edit_touches_every_game_of_the_player(player_svc, game_svc, four_players, session_factory):
    await player_svc.create(player_in("Tom", "Baker", gender="M", handicap=9))  # id 5
    await game_svc.create(game_in(1, 2, 3, 4, datetime(2029, 1, 30, 15, 0)))
    await game_svc.create(game_in(2, 1, 5, 4, datetime(2029, 1, 31, 10, 0)))
    await game_svc.create(game_in(3, 4, 5, 2, datetime(2029, 2, 1, 10, 0)))

    await player_svc.edit(2, player_in("Johnny", "Doe", email="john.doe@club.com", gender="M", handicap=21))

    async with session_factory() as s:
        cards = [g.game_card for g in (await s.exec(select(Game))).all()]
    assert len(cards) == 3
    assert all("Johnny Doe" in card and "M/21" in card for card in cards)


async def test_edit_validates_fields(player_svc, four_players, session_factory):
    message = await player_svc.edit(1, player_in("Jane", "Smith", email="john.doe@club.com"))
    assert message == "A player with this email already exists."

    async with session_factory() as s:
        jane = await s.get(Player, 1)
    assert jane.email == "jane.smith@club.com"


async def test_edit_keeping_own_email_is_allowed(player_svc, four_players):
    message = await player_svc.edit(1, player_in("Jane", "Smyth", email="jane.smith@club.com"))
    assert message == "Jane Smyth updated."


async def test_edit_unknown_player(player_svc):
    with pytest.raises(LookupError):
        await player_svc.edit(42, player_in())


# -----------------------------
# Delete
# -----------------------------

async def test_delete_cascades_to_every_slot(player_svc, game_svc, four_players, session_factory):
    await player_svc.create(player_in("Tom", "Baker", gender="M", handicap=9))  # id 5
    await player_svc.create(player_in("Lucy", "Grant", gender="F", handicap=15))  # id 6
    await player_svc.create(player_in("Sam", "Hill", gender="O", handicap=24))  # id 7

    await game_svc.create(game_in(2, 1, 3, 4, datetime(2029, 1, 30, 9, 0)))   # 2 capitaine
    await game_svc.create(game_in(1, 2, 3, 4, datetime(2029, 1, 30, 10, 0)))  # 2 en player2
    await game_svc.create(game_in(3, 4, 1, 2, datetime(2029, 1, 31, 10, 0)))  # 2 en player4
    await game_svc.create(game_in(5, 6, 7, 1, datetime(2029, 2, 1, 10, 0)))   # sans 2

    await player_svc.delete(2)

    async with session_factory() as s:
        games = (await s.exec(select(Game))).all()
        assert await s.get(Player, 2) is None
    assert [g.id for g in games] == [4]


async def test_delete_unknown_player(player_svc):
    with pytest.raises(LookupError):
        await player_svc.delete(1)


# -----------------------------
# Sort
# -----------------------------

async def test_sort_by_id_toggles(player_svc, four_players):
    asc = await player_svc.sort_tables("Id")
    desc = await player_svc.sort_tables("Id")
    assert [p.id for p in asc] == [1, 2, 3, 4]
    assert [p.id for p in desc] == [4, 3, 2, 1]


async def test_sort_by_columns(player_svc, four_players):
    by_surname = await player_svc.sort_tables("Surname", SortDirection.ASC)
    assert [p.surname for p in by_surname] == ["Doe", "Lee", "Ray", "Smith"]

    by_handicap = await player_svc.sort_tables("Handicap", SortDirection.DESC)
    assert [p.handicap for p in by_handicap] == [30, 20, 12.5, 7]


async def test_sort_unknown_column_returns_everything(player_svc, four_players):
    rows = await player_svc.sort_tables("Shoe size")
    assert sorted(p.id for p in rows) == [1, 2, 3, 4]
