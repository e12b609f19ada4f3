"""Pipeline de transformação de requisições/respostas compartilhado pelos clientes.

- case: conversão de casing de chaves (camelCase ⇄ snake_case ⇄ PascalCase)
- signature: prova HMAC-SHA256 (appsecret_proof)
- batch: codificação/decodificação de batch requests
- envelope: envelope outbound e visão normalizada para observabilidade
- interceptor: passos before-send em ordem fixa
"""

from api.transforms.batch import (
    MAX_BATCH_SIZE,
    BatchItem,
    BatchResponseItem,
    EncodedBatch,
    decode_batch,
    encode_batch,
    get_path,
    validate_batch_size,
)
from api.transforms.case import (
    camelcase,
    camelcase_keys,
    pascalcase,
    pascalcase_keys,
    snakecase,
    snakecase_keys,
    to_camel_case,
    to_pascal_case,
    to_snake_case,
)
from api.transforms.envelope import NormalizedRequest, RequestEnvelope
from api.transforms.interceptor import (
    RequestInterceptor,
    create_request_interceptor,
    default_on_request,
)
from api.transforms.signature import (
    APP_SECRET_PROOF_FIELD,
    apply_proof,
    resolve_item_token,
    sign,
    sign_batch_item,
)

__all__ = [
    "APP_SECRET_PROOF_FIELD",
    "MAX_BATCH_SIZE",
    "BatchItem",
    "BatchResponseItem",
    "EncodedBatch",
    "NormalizedRequest",
    "RequestEnvelope",
    "RequestInterceptor",
    "apply_proof",
    "camelcase",
    "camelcase_keys",
    "create_request_interceptor",
    "decode_batch",
    "default_on_request",
    "encode_batch",
    "get_path",
    "pascalcase",
    "pascalcase_keys",
    "resolve_item_token",
    "sign",
    "sign_batch_item",
    "snakecase",
    "snakecase_keys",
    "to_camel_case",
    "to_pascal_case",
    "to_snake_case",
    "validate_batch_size",
]
