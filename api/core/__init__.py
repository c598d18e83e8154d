"""
Cross-cutting building blocks shared by the RPC services.

Settings, logging, the clock, the asyncpg `Database`, error rendering, the
Connect transport and pagination live here. Each service package (`diary/`,
`columns/`, ...) keeps its own SQL, validation and messages.
"""
