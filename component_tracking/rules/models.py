from pydantic import BaseModel, Field

DEFAULT_ADMIN = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
DEFAULT_BURN_IDENTITY = "SP000000000000000000002Q6VF78"


class RegistryRules(BaseModel):
    admin: str = DEFAULT_ADMIN
    burn_identity: str = DEFAULT_BURN_IDENTITY
    max_batch_size: int = Field(default=100, ge=1)
    genesis_time: int = Field(default=0, ge=0)
