# app/profile/engine.py
"""
Lógica pura del agregado Profile (sin I/O).

Dos estrategias de escritura:

- campos escalares (company, website, ...): merge disperso, lo que no llega
  no se toca;
- `skills` y `social`: reemplazo completo. `social` se reconstruye en cada
  llamada aunque quede vacío.

Las sublistas `experience` / `education` se manejan con las mismas tres
operaciones por id (insertar al frente, reemplazar, quitar).
"""
from __future__ import annotations

import uuid
from typing import Any, Iterable, Mapping

SCALAR_FIELDS = ("company", "website", "location", "bio", "status", "githubusername")
SOCIAL_FIELDS = ("youtube", "facebook", "twitter", "instagram", "linkedin")
ENTRY_KINDS = ("experience", "education")


def _present(value: Any) -> bool:
    return value is not None and value != ""


def split_skills(raw: str) -> list[str]:
    # "a, ,b" -> ["a", "", "b"]: sin dedupe ni filtrado de vacíos
    return [s.strip() for s in raw.split(",")]


def build_profile_fields(data: Mapping[str, Any]) -> dict[str, Any]:
    """
    Arma el update-set a partir de un payload plano.

    Solo incluye los escalares presentes; `skills` se separa por comas si
    llega; `social` SIEMPRE se incluye, construido desde cero.
    """
    fields: dict[str, Any] = {
        name: data[name] for name in SCALAR_FIELDS if _present(data.get(name))
    }

    skills = data.get("skills")
    if _present(skills):
        fields["skills"] = split_skills(skills)

    fields["social"] = {
        name: data[name] for name in SOCIAL_FIELDS if _present(data.get(name))
    }
    return fields


def apply_profile_fields(profile: Any, fields: Mapping[str, Any]) -> Any:
    """Merge-patch sobre el perfil: solo las claves de `fields`."""
    for key, value in fields.items():
        if key in ENTRY_KINDS:
            continue
        setattr(profile, key, value)
    return profile


# -------------------------
# sublistas ordenadas por id
# -------------------------

def new_entry_id() -> str:
    return uuid.uuid4().hex


def insert_entry(
    entries: Iterable[dict] | None, fields: Mapping[str, Any]
) -> tuple[list[dict], dict]:
    """Devuelve (lista nueva, entrada creada). La más nueva queda en [0]."""
    entry = {"id": new_entry_id(), **{k: v for k, v in fields.items() if k != "id"}}
    return [entry, *(entries or [])], entry


def replace_entry(
    entries: Iterable[dict] | None, entry_id: str, fields: Mapping[str, Any]
) -> list[dict]:
    """
    Reemplaza en su lugar toda entrada cuyo id sea exactamente `entry_id`.
    Si no hay coincidencia la lista vuelve igual (nunca se agrega nada).
    """
    replacement = {k: v for k, v in fields.items() if k != "id"}
    out: list[dict] = []
    for entry in entries or []:
        if entry.get("id") == entry_id:
            out.append({"id": entry["id"], **replacement})
        else:
            out.append(entry)
    return out


def remove_entry(entries: Iterable[dict] | None, entry_id: str) -> list[dict]:
    return [e for e in entries or [] if e.get("id") != entry_id]
