"""Core de ghosts.

Por qué separado de adapters/cli:
- Aquí vive la lógica pura (resolución, formatos) sin I/O directo.
- Las capacidades externas (DNS, HTTP) se inyectan explícitamente.
"""
