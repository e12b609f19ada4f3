"""Payload builders por provedor.

Estrutura:
- messenger/: Send API e sub-requests de batch

Twilio e LINE Pay montam o body direto na fachada (poucos campos).
"""

__all__: list[str] = []
