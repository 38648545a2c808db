"""Modelos y errores del dominio.

El dominio no conoce la CLI: solo describe resultados de búsqueda, el
resultado de un ciclo de descarga y sus categorías de fallo.
"""
