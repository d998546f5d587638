"""
Core Package.

Contains the conversion orchestration pipeline:
- Path Inference (test/ -> spec/)
- Filesystem Guard
- Conversion Invoker and Converter Registry
- Batch Orchestrator
"""
