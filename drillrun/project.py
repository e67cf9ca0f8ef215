"""Generation of rust-project.json so rust-analyzer understands the exercises."""

from __future__ import annotations

import dataclasses
import json
import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One standalone crate entry in rust-project.json."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside #[test] blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])


@dataclass
class RustAnalyzerProject:
    """The contents of rust-project.json."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def to_json(self) -> str:
        """Serialise the project as compact JSON."""
        return json.dumps(
            dataclasses.asdict(self), separators=(",", ":"), ensure_ascii=False
        )

    def write_to_disk(self, path="./rust-project.json") -> None:
        """Write the project file."""
        Path(path).write_text(self.to_json(), encoding="utf-8")

    def exercises_to_json(self, root="./exercises") -> None:
        """Add a crate for every .rs file below ``root``."""
        paths = sorted(Path(root).glob("**/*"), key=str)
        self.crates.extend(
            Crate(root_module=str(path)) for path in paths if path.suffix == ".rs"
        )

    def get_sysroot_src(self) -> None:
        """Find the standard library sources from RUST_SRC_PATH or rustc's sysroot."""
        env_path = os.environ.get("RUST_SRC_PATH")
        if env_path is not None:
            self.sysroot_src = env_path
            return

        result = subprocess.run(
            ["rustc", "--print", "sysroot"], capture_output=True
        )
        output = (result.stdout or b"").decode("utf-8", errors="replace")
        parts = output.split()
        toolchain = parts[0] if parts else output

        print(f"Determined toolchain: {toolchain}\n")

        self.sysroot_src = str(
            Path(toolchain) / "lib" / "rustlib" / "src" / "rust" / "library"
        )