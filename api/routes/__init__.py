# app/api/routes/__init__.py
from api.routes.routes import (
    api_router,
    datasource_router,
    health_router,
    knowledgebase_router,
    get_connector_config
)
