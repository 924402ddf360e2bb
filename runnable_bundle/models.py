"""
Tenant config models.

The tenant config (``tenant.yaml``) declares the modules a tenant runs. The
bundle reader only needs two things from it: decoding from bytes and looking a
module up by name, after which the compiled Wasm is attached to the matching
module as a ``WasmModuleRef``.
"""

from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, model_validator

FQMN_PREFIX = "fqmn://"
DEFAULT_NAMESPACE = "default"


# ============================================================================
# Module models
# ============================================================================


class WasmModuleRef(BaseModel):
    """Reference to a compiled module's bytes, as loaded from a bundle."""

    name: str = Field(description="Archive entry name the bytes were read from")
    fqmn: str
    data: bytes = Field(repr=False)

    @classmethod
    def new(cls, name: str, fqmn: str, data: bytes) -> "WasmModuleRef":
        return cls(name=name, fqmn=fqmn, data=data)

    def __len__(self) -> int:
        return len(self.data)


class ModuleEntry(BaseModel):
    """A single module declared by the tenant config."""

    name: str
    namespace: str = Field(default=DEFAULT_NAMESPACE)
    lang: Optional[str] = None
    fqmn: Optional[str] = None
    wasm_ref: Optional[WasmModuleRef] = Field(default=None, exclude=True)

    @property
    def ref(self) -> str:
        """Namespace-qualified reference, e.g. ``default/hello``."""
        return f"{self.namespace}/{self.name}"


def build_fqmn(identifier: str, namespace: str, name: str, version: int) -> str:
    """Build a fully-qualified module name: fqmn://<ident>/<namespace>/<name>@<version>."""
    return f"{FQMN_PREFIX}{identifier}/{namespace}/{name}@{version}"


# ============================================================================
# Tenant config
# ============================================================================


class TenantConfig(BaseModel):
    """Decoded tenant.yaml."""

    identifier: str
    tenant_version: int = Field(default=1, alias="tenantVersion")
    default_namespace: str = Field(default=DEFAULT_NAMESPACE, alias="defaultNamespace")
    modules: List[ModuleEntry] = Field(default_factory=list)

    model_config = {"populate_by_name": True}

    @model_validator(mode="after")
    def _assign_fqmns(self) -> "TenantConfig":
        for module in self.modules:
            if not module.fqmn:
                module.fqmn = build_fqmn(self.identifier, module.namespace, module.name, self.tenant_version)
        return self

    @classmethod
    def from_yaml(cls, data: bytes) -> "TenantConfig":
        """Decode tenant config bytes.

        Raises:
            yaml.YAMLError: if the bytes are not YAML
            pydantic.ValidationError: if the document does not describe a tenant
        """
        document = yaml.safe_load(data)
        if not isinstance(document, dict):
            raise ValueError("tenant config must be a YAML mapping")
        return cls.model_validate(document)

    def to_yaml(self) -> bytes:
        document = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        return yaml.safe_dump(document, sort_keys=False).encode("utf-8")

    def module_index(self) -> Dict[str, ModuleEntry]:
        """Map every name a module can be looked up by to that module.

        Keys are FQMNs, ``namespace/name`` refs and bare names. A bare name
        shared by several namespaces resolves to the default namespace's
        module, otherwise to the first one declared.
        """
        index: Dict[str, ModuleEntry] = {}

        for module in self.modules:
            index.setdefault(module.ref, module)
            if module.fqmn:
                index.setdefault(module.fqmn, module)

        for module in self.modules:
            if module.namespace == self.default_namespace:
                index[module.name] = module
            else:
                index.setdefault(module.name, module)

        return index

    def find_module(self, name: str) -> Optional[ModuleEntry]:
        """Find a module by FQMN, ``namespace/name`` or bare name."""
        return self.module_index().get(name)
