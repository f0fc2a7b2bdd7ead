from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes.routes import api_router
from config.logging_config import logger
from config.settings import settings
from middleware.error_handler import aws_error_handler

API_VERSION = "1.0.0"

app = FastAPI(
    title="Knowledge Base Connectors API",
    description="Data sources and ingestion jobs for AWS Bedrock knowledge bases",
    version=API_VERSION,
)

# Origins come from CORS_ALLOW_ORIGINS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ConnectorError and botocore ClientError -> JSON error responses
app.middleware("http")(aws_error_handler)

app.include_router(api_router)

logger.info(
    f"Knowledge Base Connectors API {API_VERSION} ready "
    f"(region={settings.AWS_REGION}, default knowledge base={settings.KNOWLEDGE_BASE_ID})"
)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)

# uvicorn main:app --host=0.0.0.0 --port=5000
