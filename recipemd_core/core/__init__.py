"""
Core genérico del pipeline de recetas.

Contiene las interfaces (Protocols) que separan el pipeline estructural de sus
colaboradores: el parser markdown de bloques y los exportadores.
"""
