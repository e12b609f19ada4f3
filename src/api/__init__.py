"""API: clientes de provedores externos e pipeline de transformação.

Subpastas:
- transforms/: casing de chaves, assinatura HMAC, batch e interceptor
- connectors/: transporte HTTP e fachadas por provedor
- payload_builders/: construção de payloads outbound
- validators/: limites declarados pelos provedores

NÃO PODE conter: IO fora de connectors/.
"""
