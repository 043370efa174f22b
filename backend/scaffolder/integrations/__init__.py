"""Design sources: the Figma REST client and the built-in sample design."""
