"""Validators por provedor: limites checados antes de qualquer IO.

Estrutura:
- messenger/: quick replies e texto (Messenger Platform)
- twilio/: criação de mensagens SMS/WhatsApp
- line_pay/: consultas e reservas de pagamento

Cada provedor tem seus próprios validators; todos levantam
utils.errors.ValidationError com a mensagem do limite violado.
"""

__all__: list[str] = []
