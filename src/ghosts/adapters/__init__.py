"""Adaptadores de I/O (DNS, HTTP, ficheros).

Por qué un paquete aparte:
- El Core no importa nada de aquí; la CLI conecta ambos mundos.
"""
