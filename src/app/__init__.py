"""App: núcleo do serviço: domínio, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelos do pedido e validação de CPF/CNPJ
- services/: validação, canonicalização e formatação (sem IO)
- use_cases/: orquestração da persistência e da notificação
- infra/: implementações concretas de IO (Sheets, arquivo, SMTP)
- protocols/: contratos dos destinos externos
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; utils apoia.
"""
