"""Bundled project templates.

Layout:
    apps/<template>/     Files for each catalog template
    features/<feature>/  Extra files contributed by features

Text files are rendered with Jinja2; a ``.j2`` suffix is stripped and a
file named ``gitignore`` is written as ``.gitignore``.
"""
