"""CLI (Typer + Rich). Solo conecta configuración, capacidades y Core."""
