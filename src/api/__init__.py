"""API: camada de borda HTTP.

Responsabilidades:
- Receber requests, ler e decodificar o corpo
- Middlewares (correlation_id, rate limit)
- Traduzir resultados do core em respostas HTTP

NÃO PODE conter: regras de validação de pedido nem IO com planilha/e-mail.

Subpastas:
- middleware/: contexto de requisição e rate limit
- routes/: endpoints HTTP
"""
