import logging

from fastapi import APIRouter, HTTPException, status

from cyrcipher.dependencies import RegistryDep, SettingsDep, build_engine
from cyrcipher.models.schemas import DecryptRequest, DecryptResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=DecryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid key or ciphertext"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt ciphertext with a specified cipher type and key.",
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> DecryptResponse:
    """
    Decrypt ciphertext with a known key.

    The ciphertext is not normalized: it must consist of uppercase
    Russian letters only, exactly as produced by /encrypt.
    """
    # Validate ciphertext length
    if len(request.ciphertext) > settings.max_text_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Ciphertext exceeds maximum length of {settings.max_text_length}",
        )

    engine = build_engine(registry, settings, request.cipher_type, request.key)
    plaintext = engine.decrypt(request.ciphertext)

    logger.info("Decrypted %d letters with %s", len(plaintext), request.cipher_type.value)

    return DecryptResponse(
        plaintext=plaintext,
        cipher_type=request.cipher_type,
        key_used=engine.key,
        explanation=engine.explain(request.ciphertext, plaintext),
    )
