
# app/config/__init__.py
from config.settings import settings
from config.logging_config import logger
from config.aws_config import get_bedrock_agent_client, region
