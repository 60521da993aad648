"""Namespace for entry importers; it holds no importers yet."""