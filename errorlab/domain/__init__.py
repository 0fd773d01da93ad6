"""
Domain layer package.

Contains pure logic: entities, static catalogs, generators,
and port interfaces. This layer has ZERO external dependencies.
No framework imports, no IO, no side effects.
"""
