"""DevConnector API: usuarios y perfiles de desarrolladores."""
