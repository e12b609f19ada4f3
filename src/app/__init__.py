"""App: contratos compartilhados e composition root.

Subpastas:
- bootstrap/: factories dos clientes e inicialização de logging
- protocols/: contratos (transporte, callback de observabilidade, modelos)
"""
