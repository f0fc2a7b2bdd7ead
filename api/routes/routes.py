from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.models.connector_models import ConnectorConfig
from api.models.models import DataSourceRequest, IngestionRequest, UpdateDataSourceRequest
from config.aws_config import get_bedrock_agent_client
from config.settings import settings
from services.connectors.factory import get_available_types
from services.data_source_service import DataSourceService, strip_metadata
from services.knowledgebase_service import KnowledgeBaseManager


def get_connector_config() -> ConnectorConfig:
    return ConnectorConfig.from_settings(settings)


# Parent router with a common prefix
api_router = APIRouter(prefix="/ai")

# Feature routers
knowledgebase_router = APIRouter(prefix="/knowledgebases", tags=["Knowledge Bases"])
datasource_router = APIRouter(
    prefix="/knowledgebases/{knowledge_base_id}/datasources", tags=["Data Sources"]
)
health_router = APIRouter(prefix="/health", tags=["Health"])


# Knowledge base routes
@knowledgebase_router.get("")
def list_knowledge_bases(client=Depends(get_bedrock_agent_client)):
    """
    Get list of all knowledge bases
    """
    return KnowledgeBaseManager(client).summarize_knowledge_bases()

@knowledgebase_router.get("/{knowledge_base_id}")
def get_knowledge_base(knowledge_base_id: str, client=Depends(get_bedrock_agent_client)):
    return strip_metadata(KnowledgeBaseManager(client).get_knowledge_base(knowledge_base_id))

@knowledgebase_router.delete("/{knowledge_base_id}")
def delete_knowledge_base(knowledge_base_id: str, client=Depends(get_bedrock_agent_client)):
    return strip_metadata(KnowledgeBaseManager(client).delete_knowledge_base(knowledge_base_id))


# Data source routes
@datasource_router.get("/types")
def list_connector_types(knowledge_base_id: str):
    """Connector types that can be created under a knowledge base"""
    return {"types": [connector_type.value for connector_type in get_available_types()]}

@datasource_router.get("")
def list_data_sources(
    knowledge_base_id: str,
    client=Depends(get_bedrock_agent_client),
    config: ConnectorConfig = Depends(get_connector_config),
):
    connector = DataSourceService.connector(client, knowledge_base_id, config)
    return strip_metadata(connector.list_data_sources())

@datasource_router.post("", status_code=201)
def create_data_source(
    knowledge_base_id: str,
    request: DataSourceRequest,
    client=Depends(get_bedrock_agent_client),
    config: ConnectorConfig = Depends(get_connector_config),
):
    return DataSourceService.create_data_source(client, knowledge_base_id, request, config)

@datasource_router.get("/{data_source_id}")
def get_data_source(
    knowledge_base_id: str,
    data_source_id: str,
    client=Depends(get_bedrock_agent_client),
    config: ConnectorConfig = Depends(get_connector_config),
):
    connector = DataSourceService.connector(client, knowledge_base_id, config)
    return strip_metadata(connector.get_data_source(data_source_id))

@datasource_router.put("/{data_source_id}")
def update_data_source(
    knowledge_base_id: str,
    data_source_id: str,
    request: UpdateDataSourceRequest,
    client=Depends(get_bedrock_agent_client),
    config: ConnectorConfig = Depends(get_connector_config),
):
    return DataSourceService.update_data_source(
        client, knowledge_base_id, data_source_id, request, config
    )

@datasource_router.delete("/{data_source_id}")
def delete_data_source(
    knowledge_base_id: str, data_source_id: str, client=Depends(get_bedrock_agent_client)
):
    return DataSourceService.delete_data_source(client, knowledge_base_id, data_source_id)

# Ingestion routes
@datasource_router.post("/{data_source_id}/ingestion-jobs", status_code=202)
def start_ingestion(
    knowledge_base_id: str,
    data_source_id: str,
    request: Optional[IngestionRequest] = None,
    client=Depends(get_bedrock_agent_client),
    config: ConnectorConfig = Depends(get_connector_config),
):
    return DataSourceService.start_ingestion(
        client, knowledge_base_id, data_source_id, request or IngestionRequest(), config
    )

@datasource_router.get("/{data_source_id}/ingestion-jobs")
def list_ingestion_jobs(
    knowledge_base_id: str,
    data_source_id: str,
    client=Depends(get_bedrock_agent_client),
    config: ConnectorConfig = Depends(get_connector_config),
):
    connector = DataSourceService.connector(client, knowledge_base_id, config)
    return strip_metadata(connector.list_ingestion_jobs(data_source_id))

@datasource_router.get("/{data_source_id}/ingestion-jobs/{ingestion_job_id}")
def get_ingestion_job(
    knowledge_base_id: str,
    data_source_id: str,
    ingestion_job_id: str,
    client=Depends(get_bedrock_agent_client),
    config: ConnectorConfig = Depends(get_connector_config),
):
    return DataSourceService.get_ingestion_job(
        client, knowledge_base_id, data_source_id, ingestion_job_id, config
    )


# Health check route
@health_router.get("")
async def health_check():
   return JSONResponse({
       "status": "healthy",
       "service": "kb-connectors",
       "timestamp": datetime.now().isoformat()
   })


# Include all routers in parent router
api_router.include_router(knowledgebase_router)
api_router.include_router(datasource_router)
api_router.include_router(health_router)
