from pydantic import BaseModel


class ClientAddressResponse(BaseModel):
    client_address: str
    client_public_address: str
    remote_address: str
    forwarded_for: list[str]
    is_local: bool  # Classification of client_address


class ClassifyResponse(BaseModel):
    address: str
    is_local: bool
    is_public: bool
