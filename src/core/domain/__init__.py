"""Catálogo de tipos de la plataforma (Pydantic v2).

Por qué:
- Aquí viven los contratos del cable: envoltorio, enums, flags y payloads.
- El dominio no conoce HTTP ni CLI; solo la forma de los datos del vendor.

Organización por área del vendor: `models` (envoltorio y raíz), `user`,
`destiny`, `groups`; `enums` reúne enums simples y de bits.
"""
