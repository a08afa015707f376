import logging

from fastapi import APIRouter, HTTPException, status

from cyrcipher.dependencies import RegistryDep, SettingsDep, build_engine, random_key_options
from cyrcipher.models.schemas import EncryptRequest, EncryptResponse, ErrorResponse
from cyrcipher.services.preprocessing.normalizer import TextNormalizer

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=EncryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid key or text"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Encrypt plaintext",
    description="Encrypt Russian plaintext with the Gronsfeld or table route cipher.",
)
async def encrypt_plaintext(
    request: EncryptRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> EncryptResponse:
    """
    Encrypt plaintext with a specified cipher type.

    Characters outside the alphabet are dropped and reported back in
    `removed_characters`. A random key is generated when none is given.
    """
    # Validate plaintext length
    if len(request.plaintext) > settings.max_text_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Plaintext exceeds maximum length of {settings.max_text_length}",
        )

    engine_class = registry.get_engine_class(request.cipher_type)

    # Generate key if not provided
    key = request.key
    if key is None:
        key = engine_class.generate_random_key(**random_key_options(settings))

    engine = build_engine(registry, settings, request.cipher_type, key)

    normalized = TextNormalizer(engine.alphabet).normalize_full(request.plaintext)
    ciphertext = engine.encrypt(normalized.text)

    logger.info(
        "Encrypted %d letters with %s (%d characters removed)",
        len(normalized.text),
        request.cipher_type.value,
        sum(normalized.removed_chars.values()),
    )

    return EncryptResponse(
        ciphertext=ciphertext,
        cipher_type=request.cipher_type,
        key_used=engine.key,
        removed_characters=normalized.removed_chars,
    )
