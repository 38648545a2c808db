"""Core de meow-loader: dominio, configuración y servicios."""
