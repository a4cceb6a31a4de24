# showcase/__init__.py
