"""
Schema augmentation generators.
"""
