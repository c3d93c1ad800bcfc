"""
Sketchfab MCP - Model Context Protocol server for the Sketchfab 3D catalog.

This package provides tools for:
- Searching Sketchfab models by keyword, tag and category
- Inspecting a single model's metadata
- Downloading a model in gltf, glb, usdz or source format
"""

__version__ = "1.0.10"
