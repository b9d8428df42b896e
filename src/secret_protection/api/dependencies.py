"""FastAPI dependencies for routes that accept public ids.

A public id that cannot be decoded is answered with a plain 404, the
same response as a missing record, so clients learn nothing about the
token's structure.
"""

from functools import lru_cache
from typing import Annotated, Callable

from fastapi import Depends, HTTPException, status

from secret_protection.bootstrap import SecretServices, build_services
from secret_protection.config import settings
from secret_protection.domain.public_id import PublicIdCodec, PublicIdPayload, PublicIdType
from secret_protection.domain.vault import SecretVault
from secret_protection.logging_config import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def get_services() -> SecretServices:
    """Provide the process-wide service set, built once from settings.

    Override with app.dependency_overrides[get_services] in tests.
    """
    return build_services(settings)


Services = Annotated[SecretServices, Depends(get_services)]


def get_public_id_codec(services: Services) -> PublicIdCodec:
    """Provide the public id codec."""
    return services.public_ids


PublicIds = Annotated[PublicIdCodec, Depends(get_public_id_codec)]


def get_secret_vault(services: Services) -> SecretVault:
    """Provide the secret vault."""
    return services.vault


Vault = Annotated[SecretVault, Depends(get_secret_vault)]


def public_id_dependency(
    expected_type: PublicIdType | None = None,
) -> Callable[..., PublicIdPayload]:
    """Build a dependency that decodes a `public_id` parameter.

    FastAPI reads `public_id` from the path when the route declares
    `{public_id}`, otherwise from the query string.

    Args:
        expected_type: Reject ids of any other record kind

    Returns:
        Dependency callable returning the decoded PublicIdPayload. It
        raises HTTPException 404 if the id does not decode.
    """

    def dependency(public_id: str, codec: PublicIds) -> PublicIdPayload:
        payload = codec.decode(public_id, expected_type=expected_type)
        if payload is None:
            logger.info("public_id_not_found", expected_type=getattr(expected_type, "value", None))
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
        return payload

    return dependency
