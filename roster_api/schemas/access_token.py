# roster_api/schemas/access_token.py
from roster_api.schemas.base import CamelModel


class ClassAccessUrl(CamelModel):
    message: str
    class_name: str
    access_url: str
    full_url: str
    expires_in: str
