"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) modifie le schéma généré par FastAPI pour :

ajouter un titre, une description détaillée,

centraliser la personnalisation du Swagger.

🔹 Avantages :

La doc est toujours complète et cohérente.

Tu peux y ajouter des conventions d’API (formats, messages, etc.).
"""

from fastapi.openapi.utils import get_openapi

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API du club de golf : joueurs, réservations de parties, cartes de partie.\n\n"
            "### Conventions\n"
            "- Les heures de partie sont des heures locales du club (sans fuseau).\n"
            "- Création : la réponse `message` contient soit le résultat, soit la règle violée.\n"
            "- Tri : `column` + `direction` (`asc` | `desc`).\n"
        ),
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
