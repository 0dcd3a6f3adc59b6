import asyncio

from fastapi import FastAPI, APIRouter, HTTPException
import structlog

from crypto_utils import registry
from crypto_utils.algorithms import ALGORITHMS
from crypto_utils.errors import CryptoUtilsError
from crypto_utils.log import configure_logging

from . import models

# The CLI configures logging from its own options before importing the app.
if not structlog.is_configured():
    configure_logging()
log = structlog.get_logger()
log.info("logger initialized")

# Create the FastAPI app
app = FastAPI(title="Crypto Utils API")

# Create the router for API endpoints
router = APIRouter()


@router.get("/algorithms", response_model=models.AlgorithmsResponse)
def algorithms():
    """ List the supported algorithms with their key shape and help text. """
    return models.AlgorithmsResponse(
        algorithms=[
            models.AlgorithmResponse(
                alg=info.algorithm,
                name=info.name,
                key_shape=info.key_shape,
                encoding=info.encoding,
                description=info.description,
                details=info.details,
            )
            for info in ALGORITHMS.values()
        ]
    )


@router.post("/encrypt", response_model=models.EncryptResponse)
def encrypt(req: models.EncryptRequest):
    """ Encrypt the given plaintext with the selected algorithm. """
    try:
        registry.check_request(req.alg, req.plaintext, req.key, "encrypt")
        ciphertext = registry.encrypt(req.alg, req.plaintext, req.key)
    except CryptoUtilsError as e:
        log.warning("encrypt rejected", alg=str(req.alg), error_kind=type(e).__name__)
        raise HTTPException(status_code=400, detail=str(e))

    log.info("encrypted", alg=str(req.alg), plaintext_len=len(req.plaintext), ciphertext_len=len(ciphertext))
    return models.EncryptResponse(alg=req.alg, ciphertext=ciphertext)


@router.post("/decrypt", response_model=models.DecryptResponse)
def decrypt(req: models.DecryptRequest):
    """ Decrypt the given ciphertext with the selected algorithm. """
    try:
        registry.check_request(req.alg, req.ciphertext, req.key, "decrypt")
        plaintext = registry.decrypt(req.alg, req.ciphertext, req.key)
    except CryptoUtilsError as e:
        log.warning("decrypt rejected", alg=str(req.alg), error_kind=type(e).__name__)
        raise HTTPException(status_code=400, detail=str(e))

    log.info("decrypted", alg=str(req.alg), ciphertext_len=len(req.ciphertext), plaintext_len=len(plaintext))
    return models.DecryptResponse(alg=req.alg, plaintext=plaintext)


@router.post("/keys", response_model=models.KeyResponse)
def keys(req: models.KeyRequest):
    """ Generate a key for a symmetric or classical algorithm. """
    try:
        key = registry.generate_key(req.alg, req.length)
    except CryptoUtilsError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return models.KeyResponse(alg=req.alg, key=key)


@router.post("/keypair", response_model=models.KeypairResponse)
async def keypair():
    """ Generate an RSA keypair without blocking the event loop. """
    pair = await asyncio.wrap_future(registry.generate_keypair_future())
    return models.KeypairResponse(public_key=pair.public_key, private_key=pair.private_key)


# Include the router in the app (after all routes are defined)
app.include_router(router, prefix="/api")
