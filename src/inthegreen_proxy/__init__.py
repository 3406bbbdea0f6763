"""InTheGreenYet proxy: Notion OAuth exchange and workspace provisioning."""
