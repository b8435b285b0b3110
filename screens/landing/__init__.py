# screens/landing/__init__.py
