"""Infrastructure layer: configuration, logging, i18n, services and resources."""
