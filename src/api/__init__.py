"""API: camada de borda HTTP.

Responsabilidades:
- Receber requests (webhook do Telegram, painel admin)
- Validar secret do webhook e sessão do admin
- Extrair dados de payloads externos para modelos internos
- Chamar a Bot API do Telegram

Subpastas:
- connectors/: cliente HTTP e parse do webhook do Telegram
- normalizers/: extração de mensagens de updates do Telegram
- routes/: endpoints HTTP (webhook, admin, páginas, health)

NÃO PODE conter: regras de cadastro, acesso direto ao store.
"""
