"""i18nstore test suite."""
