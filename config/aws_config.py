import os
from functools import lru_cache

import boto3
from botocore.config import Config
from dotenv import load_dotenv

from config.settings import settings

# Load environment variables
load_dotenv()

# Get configuration from environment variables
region = os.getenv("AWS_REGION", settings.AWS_REGION)

# AWS Config
config = Config(region_name=region, retries=dict(max_attempts=3, mode="standard"))


@lru_cache(maxsize=1)
def get_bedrock_agent_client():
    """
    Get the shared bedrock-agent client.

    The client is owned by the caller of this function (the API process or a
    demo driver); connectors only hold a reference and never close it.

    Returns:
        botocore.client.AgentsforBedrock: bedrock-agent client
    """
    return boto3.client("bedrock-agent", config=config)
