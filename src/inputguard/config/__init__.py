"""Settings loading and management for InputGuard validators.

Main components:
- SettingsLoader (``inputguard.config.loader``): resolve length limits from
  a YAML file, INPUTGUARD_* environment variables and defaults
- get_settings / configure: process-wide settings access
- Default limits (``inputguard.config.defaults``)

Import the loader from its module; this package stays import-light because
the settings model itself depends on the defaults defined here.
"""
