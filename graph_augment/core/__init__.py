"""
Core building blocks: AST builders, directives, settings and the schema driver.
"""
