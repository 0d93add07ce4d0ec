"""Auxiliary artifacts: ICO icon pack, web manifest and platform descriptors."""
