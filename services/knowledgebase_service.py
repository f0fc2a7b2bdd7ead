from typing import Any, Dict, List, Optional

from config.logging_config import logger
from services.connectors.base import call_bedrock_agent

DEFAULT_MAX_RESULTS = 50


class KnowledgeBaseManager:
    """Knowledge base level operations; the bedrock-agent client is owned by the caller."""

    def __init__(self, client):
        self.client = client

    def create_knowledge_base(
        self,
        name: str,
        description: Optional[str],
        role_arn: str,
        knowledge_base_configuration: Dict[str, Any],
        storage_configuration: Dict[str, Any],
    ) -> Dict[str, Any]:
        params = {
            "name": name,
            "roleArn": role_arn,
            "knowledgeBaseConfiguration": knowledge_base_configuration,
            "storageConfiguration": storage_configuration,
        }
        if description:
            params["description"] = description

        response = call_bedrock_agent(
            self.client,
            "create_knowledge_base",
            f"Failed to create knowledge base: {name}",
            **params,
        )
        logger.info(
            f"Created knowledge base {name} "
            f"({response.get('knowledgeBase', {}).get('knowledgeBaseId')})"
        )
        return response

    def get_knowledge_base(self, knowledge_base_id: str) -> Dict[str, Any]:
        return call_bedrock_agent(
            self.client,
            "get_knowledge_base",
            f"Failed to get knowledge base: {knowledge_base_id}",
            knowledgeBaseId=knowledge_base_id,
        )

    def list_knowledge_bases(
        self, max_results: int = DEFAULT_MAX_RESULTS, next_token: Optional[str] = None
    ) -> Dict[str, Any]:
        list_params = {"maxResults": max_results}
        if next_token:
            list_params["nextToken"] = next_token

        return call_bedrock_agent(
            self.client,
            "list_knowledge_bases",
            "Failed to list knowledge bases",
            **list_params,
        )

    def delete_knowledge_base(self, knowledge_base_id: str) -> Dict[str, Any]:
        response = call_bedrock_agent(
            self.client,
            "delete_knowledge_base",
            f"Failed to delete knowledge base: {knowledge_base_id}",
            knowledgeBaseId=knowledge_base_id,
        )
        logger.info(f"Deleted knowledge base {knowledge_base_id}")
        return response

    def summarize_knowledge_bases(self, max_results: int = DEFAULT_MAX_RESULTS) -> Dict[str, Any]:
        """
        List knowledge bases as flat summaries.

        Returns:
            dict: ``knowledgebases`` (list of summaries), ``total_count`` and
            ``next_token`` when the listing has more pages
        """
        response = self.list_knowledge_bases(max_results=max_results)

        knowledgebases: List[Dict[str, Any]] = []
        for kb in response.get("knowledgeBaseSummaries", []):
            knowledgebases.append(
                {
                    "knowledge_base_id": kb.get("knowledgeBaseId"),
                    "name": kb.get("name"),
                    "description": kb.get("description"),
                    "status": kb.get("status"),
                    "last_updated_time": (
                        kb.get("updatedAt").isoformat() if kb.get("updatedAt") else None
                    ),
                }
            )

        result = {"knowledgebases": knowledgebases, "total_count": len(knowledgebases)}
        if "nextToken" in response:
            result["next_token"] = response["nextToken"]
        return result

    @staticmethod
    def create_opensearch_serverless_config(
        collection_arn: str,
        vector_index_name: str,
        text_field: str,
        vector_field: str,
        metadata_field: str,
    ) -> Dict[str, Any]:
        """Storage configuration for an OpenSearch Serverless vector index."""
        return {
            "type": "OPENSEARCH_SERVERLESS",
            "opensearchServerlessConfiguration": {
                "collectionArn": collection_arn,
                "vectorIndexName": vector_index_name,
                "fieldMapping": {
                    "textField": text_field,
                    "vectorField": vector_field,
                    "metadataField": metadata_field,
                },
            },
        }

    @staticmethod
    def create_vector_configuration(embedding_model_arn: str) -> Dict[str, Any]:
        return {
            "type": "VECTOR",
            "vectorKnowledgeBaseConfiguration": {"embeddingModelArn": embedding_model_arn},
        }
