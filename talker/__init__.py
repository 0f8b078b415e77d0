# talker/__init__.py
