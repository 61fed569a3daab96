"""SystemInfo schema definitions for hfetch."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class InitSystem(str, Enum):
    """Init system enumeration."""

    SYSTEMD = "systemd"
    OPENRC = "openrc"
    RUNIT = "runit"
    S6 = "s6"
    SYSVINIT = "sysvinit"
    DINIT = "dinit"
    SHEPHERD = "shepherd"
    OTHER = "other"


class SystemInfo(BaseModel):
    """
    Host facts shown in the banner.

    Built once per run by the collector and never modified afterwards.
    Every field has a placeholder default so a partially collected host
    still produces a complete banner.
    """

    model_config = ConfigDict(frozen=True)

    hostname: str = Field(default="", description="Node name from uname")
    distro: str = Field(default="unknown", description="Distribution pretty name")
    init_system: InitSystem = Field(
        default=InitSystem.OTHER, description="Detected init system"
    )
    kernel_version: str = Field(default="", description="Kernel release from uname")
    native_packages: int = Field(
        default=0, ge=0, description="Packages installed by the native manager"
    )
    flatpak_packages: int = Field(
        default=0, ge=0, description="Installed flatpak applications and runtimes"
    )
    mem_total: int = Field(default=0, ge=0, description="Total physical memory (MB)")
    mem_free: int = Field(default=0, ge=0, description="Free physical memory (MB)")

    @model_validator(mode="after")
    def validate_memory(self) -> "SystemInfo":
        """Validate free memory never exceeds total when total is known."""
        if self.mem_total and self.mem_free > self.mem_total:
            raise ValueError(
                f"mem_free ({self.mem_free}) exceeds mem_total ({self.mem_total})"
            )
        return self
