"""
Dominio de recetas RecipeMD.

Este módulo contiene toda la lógica específica de recetas:
- Modelos de datos (Recipe, Ingredient, IngredientGroup, Amount)
- Segmentación, clasificación de metadata y árbol de ingredientes
- Parser de cantidades y separador de listas
- Builder y Renderer (reconstrucción markdown)
- Perfiles de presentación HTML
"""
