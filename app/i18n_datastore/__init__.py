"""i18n datastore - localized message resolution with language fallbacks.

Packages:
- configuration: pydantic settings for the message engine
- logging: structlog configuration and request context helpers
- messages: datastore, loader, resolvers and default collaborators
- services: application-scoped providers
"""
