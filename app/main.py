"""
➡️ But : assembler toutes les pièces du puzzle.

Crée l’instance FastAPI (app).

Configure :

les logs (niveau depuis settings.LOG_LEVEL)

CORS (autorisations de qui peut appeler ces API)

titre, version, tags

schéma OpenAPI personnalisé

Inclut les routers (/api/v1/players, /api/v1/games).

Initialise la base au démarrage (@app.on_event("startup")).

🔹 Avantages :

Centralise la configuration du serveur HTTP.

Point unique d’exécution : uvicorn app.main:app --reload.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.logging import configure_logging
from app.core.openapi import custom_openapi
from app.db.session import init_db

from app.api.v1.routers import players, games

import uvicorn

configure_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.APP_NAME,
    version="0.0.1",
    openapi_tags=[
        {"name": "players", "description": "Opérations liées aux joueurs du club"},
        {"name": "games", "description": "Réservations de parties et cartes de partie"},
    ],
)

# CORS (ajustez selon vos besoins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)

# Routers
app.include_router(players.router, prefix="/api/v1")
app.include_router(games.router, prefix="/api/v1")

# Génération du schéma OpenAPI custom (facultatif, mais propre)
app.openapi = lambda: custom_openapi(app)

# Démarrage
@app.on_event("startup")
async def on_startup():
    await init_db()

if __name__ == "__main__":
    uvicorn.run(app, host="127.0.0.1", port=8080, reload=(settings.ENV == "dev")) # http://localhost:8080
