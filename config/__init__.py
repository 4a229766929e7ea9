"""
Spacing scale and CSS output packages.
"""
