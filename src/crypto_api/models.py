from typing import List, Optional

from pydantic import BaseModel, Field

from crypto_utils.algorithms import Algorithm, CiphertextEncoding, KeyShape


class EncryptRequest(BaseModel):
    alg: Algorithm
    plaintext: str
    key: Optional[str] = None


class EncryptResponse(BaseModel):
    alg: Algorithm
    ciphertext: str


class DecryptRequest(BaseModel):
    alg: Algorithm
    ciphertext: str
    key: Optional[str] = None


class DecryptResponse(BaseModel):
    alg: Algorithm
    plaintext: str


class KeyRequest(BaseModel):
    alg: Algorithm
    length: Optional[int] = Field(default=None, ge=1, le=4096)


class KeyResponse(BaseModel):
    alg: Algorithm
    key: str


class KeypairResponse(BaseModel):
    alg: Algorithm = Algorithm.RSA
    public_key: str
    private_key: str


class AlgorithmResponse(BaseModel):
    alg: Algorithm
    name: str
    key_shape: KeyShape
    encoding: CiphertextEncoding
    description: str
    details: str


class AlgorithmsResponse(BaseModel):
    algorithms: List[AlgorithmResponse]
