"""Data models: responsive values, theme defaults and component props."""
