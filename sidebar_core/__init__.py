"""Query layer for sidebars registered by a host CMS."""
