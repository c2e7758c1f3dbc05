from typing import Dict
from pydantic import BaseModel, ConfigDict, Field

# Every user lives in its own partition keyed by email; the row key is fixed.
USER_ROW_KEY = "user"

class User(BaseModel):
    """User model; email is the primary key and never changes once created"""
    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        json_schema_extra={
            "example": {"name": "John", "surName": "Doe", "email": "john.doe@example.com"}
        },
    )

    name: str
    sur_name: str = Field(alias="surName")
    email: str

    def to_entity(self) -> Dict[str, str]:
        """Convert the User model to an Azure Table entity"""
        return {
            "PartitionKey": self.email,
            "RowKey": USER_ROW_KEY,
            "Name": self.name,
            "SurName": self.sur_name,
            "Email": self.email,
        }

    @classmethod
    def from_entity(cls, entity: Dict) -> "User":
        """Create user model from Azure table entity"""
        return cls(
            name=entity["Name"],
            sur_name=entity["SurName"],
            email=entity.get("Email", entity["PartitionKey"]),
        )
