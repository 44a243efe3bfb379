"""
Dominios específicos del pipeline.

Cada dominio define:
- Modelos de dominio específicos
- Parsers específicos (sobre el modelo neutro de `markdown_tree`)
- Renderers específicos
- Perfiles de presentación específicos
"""
