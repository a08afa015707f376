from fastapi import APIRouter

from cyrcipher.dependencies import RegistryDep
from cyrcipher.models.schemas import CipherInfo, CipherListResponse
from cyrcipher.services.preprocessing.alphabet import RUSSIAN

router = APIRouter()


@router.get(
    "",
    response_model=CipherListResponse,
    summary="List supported ciphers",
    description="List registered cipher engines and the alphabet they operate on.",
)
async def list_ciphers(registry: RegistryDep) -> CipherListResponse:
    """Describe every registered engine."""
    ciphers = [
        CipherInfo(
            cipher_type=engine_class.cipher_type,
            cipher_family=engine_class.cipher_family,
            name=engine_class.name,
            description=engine_class.description,
            key_kind=engine_class.key_kind,
        )
        for engine_class in registry.get_all_engine_classes()
    ]

    return CipherListResponse(ciphers=ciphers, alphabet=RUSSIAN.symbols)
