"""
tools - Замеры и профилирование решателя.
"""
