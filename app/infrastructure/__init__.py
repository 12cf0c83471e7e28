"""Infrastructure modules for the translation catalog application.

Centralized infrastructure components:
- configuration: Settings management (settings, I18nSettings)
- logging: Structured logging (get_module_logger)
- operations: Operation results (OperationResult, OperationStatus)
- i18n: Catalog building, persistence and message rendering
- services: Dependency injection services (CatalogStoreDep)
"""
