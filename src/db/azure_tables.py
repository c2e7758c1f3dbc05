import re
import time
import logging
from typing import List, Optional

from azure.data.tables import TableClient, TableServiceClient, UpdateMode
from azure.core.pipeline.policies import RetryPolicy, RetryMode
from azure.core.exceptions import AzureError, ResourceNotFoundError

from src.config.settings import settings
from src.models.errors import StorageError
from src.models.user import User, USER_ROW_KEY

logger = logging.getLogger(__name__)

# Configure retry policy for resilience
retry_policy = RetryPolicy(
    retry_mode=RetryMode.Exponential,
    backoff_factor=2,
    backoff_max=60,
    total_retries=5
)

def create_table_service_client() -> TableServiceClient:
    """Build a TableServiceClient from the configured credentials"""
    if settings.AZURE.USE_MANAGED_IDENTITY:
        try:
            from azure.identity import DefaultAzureCredential
        except ImportError:
            logger.error("azure.identity not installed but managed identity is enabled")
            raise
        logger.info("Using managed identity for Azure Table Storage authentication")
        return TableServiceClient(
            endpoint=settings.AZURE.ACCOUNT_URL,
            credential=DefaultAzureCredential(),
            retry_policy=retry_policy
        )

    logger.info("Using connection string for Azure Table Storage authentication")
    return TableServiceClient.from_connection_string(
        settings.AZURE.CONNECTION_STRING,
        retry_policy=retry_policy
    )

def init_user_table(service_client: Optional[TableServiceClient] = None, max_attempts: int = 3) -> TableClient:
    """Create the user table if needed and return a client bound to it"""
    table_service_client = service_client or create_table_service_client()
    table_name = settings.AZURE.TABLE_NAME

    for attempt in range(max_attempts):
        try:
            table_service_client.create_table_if_not_exists(table_name)
            table_client = table_service_client.get_table_client(table_name)
            logger.info(f"Successfully initialized table: {table_name}")
            return table_client
        except AzureError as e:
            if attempt == max_attempts - 1:
                logger.error(f"Failed to initialize table {table_name} after {max_attempts} attempts: {str(e)}")
                raise
            logger.warning(f"Failed to initialize table {table_name}, attempt {attempt+1}/{max_attempts}: {str(e)}")
            time.sleep(2 ** attempt)  # Exponential backoff

# Characters Azure Tables rejects in PartitionKey values
INVALID_KEY_CHARS = re.compile(r"[/\\#?\x00-\x1f\x7f-\x9f]")

def is_valid_key(email: str) -> bool:
    return bool(email) and not INVALID_KEY_CHARS.search(email)

def _storage_error(e: AzureError) -> StorageError:
    return StorageError(f"Azure Table Storage error: {e.message}")

class AzureTableUserStore:
    """User store backed by an Azure Storage table, one partition per email"""

    def __init__(self, table_client: TableClient):
        self.table_client = table_client

    def create(self, user: User) -> None:
        try:
            self.table_client.upsert_entity(user.to_entity(), mode=UpdateMode.REPLACE)
        except AzureError as e:
            logger.error(f"Failed to create user {user.email}: {e.message}")
            raise _storage_error(e) from e
        logger.info(f"User created successfully: {user.email}")

    def get_by_email(self, email: str) -> Optional[User]:
        # No stored record can have a key the table would reject
        if not is_valid_key(email):
            return None
        try:
            entity = self.table_client.get_entity(partition_key=email, row_key=USER_ROW_KEY)
        except ResourceNotFoundError:
            return None
        except AzureError as e:
            logger.error(f"Failed to get user {email}: {e.message}")
            raise _storage_error(e) from e
        logger.info(f"User retrieved successfully: {email}")
        return User.from_entity(entity)

    def update(self, user: User) -> bool:
        if not is_valid_key(user.email):
            return False
        # update_entity only succeeds against an existing entity, so a missing
        # record is reported rather than created.
        try:
            self.table_client.update_entity(user.to_entity(), mode=UpdateMode.REPLACE)
        except ResourceNotFoundError:
            return False
        except AzureError as e:
            logger.error(f"Failed to update user {user.email}: {e.message}")
            raise _storage_error(e) from e
        logger.info(f"User updated successfully: {user.email}")
        return True

    def delete(self, email: str) -> bool:
        # delete_entity is a no-op for missing entities, so check first
        if self.get_by_email(email) is None:
            return False
        try:
            self.table_client.delete_entity(partition_key=email, row_key=USER_ROW_KEY)
        except AzureError as e:
            logger.error(f"Failed to delete user {email}: {e.message}")
            raise _storage_error(e) from e
        logger.info(f"User deleted successfully: {email}")
        return True

    def list(self) -> List[User]:
        try:
            users = [
                User.from_entity(entity)
                for entity in self.table_client.query_entities(
                    query_filter="RowKey eq @row_key",
                    parameters={"row_key": USER_ROW_KEY}
                )
            ]
        except AzureError as e:
            logger.error(f"Failed to list users: {e.message}")
            raise _storage_error(e) from e
        logger.info(f"Listed {len(users)} users")
        return users

    def ping(self) -> None:
        """Cheap connectivity check reading at most one row key"""
        try:
            next(iter(self.table_client.list_entities(select=["RowKey"], results_per_page=1)), None)
        except AzureError as e:
            logger.warning(f"User table check failed: {e.message}")
            raise _storage_error(e) from e
