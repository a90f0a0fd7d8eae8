"""
Root test package marker.

Only the root tests/ directory carries an __init__.py; subdirectories work as
namespace packages (PEP 420), so pytest resolves test modules consistently
without an __init__.py in every folder.
"""
