"""API — clientes de borda para plataformas de mensageria.

Subpastas:
- connectors/: um cliente HTTP por plataforma (Telegram, Messenger, Viber)

NÃO PODE conter: regras de negócio de mensageria, retry/backoff,
gestão de ciclo de vida de tokens.
"""
