"""Connectors por provedor: fachadas sobre o pipeline de transformação.

Estrutura:
- messenger/: Messenger Platform (Send API, Graph API, batch)
- twilio/: Twilio Messages (SMS/WhatsApp)
- line_pay/: LINE Pay v2

Cada fachada compõe interceptor + transporte (http_base) e normaliza os
erros do provedor em RemoteApiError.
"""

__all__: list[str] = []
