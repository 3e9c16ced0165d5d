"""
web - Flask JSON API решателя.
"""
