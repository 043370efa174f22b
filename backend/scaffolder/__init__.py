"""Figma → Angular Material scaffolder package.

Subpackages:
- analysis: Design-tree classification and property extraction (pure, synchronous)
- integrations: Design sources (Figma REST client, built-in sample design)
- codegen: Angular Material template emitters and zip bundles
"""
