"""Static assets written into every generated project."""

from __future__ import annotations

from .config import ProjectTemplate

__all__ = [
    "CARGO_TOML",
    "ENGINE_DIR",
    "GODOT_GDEXTENSION",
    "GODOT_GITIGNORE",
    "LIB_RS",
    "NATIVE_DIR",
    "PROJECT_DESCRIPTOR_TEMPLATE",
    "PROJECT_GITIGNORE",
    "PROTO_DIRECTORIES",
    "RUST_GITIGNORE",
    "extension_manifest_name",
]


ENGINE_DIR = "engine-project"
NATIVE_DIR = "native"

PROJECT_GITIGNORE = """# Editors and OS clutter
.DS_Store
Thumbs.db
*.swp
.idea/
.vscode/
"""

GODOT_GITIGNORE = """# Godot 4+ specific ignores
.godot/
/android/
export_presets.cfg
"""

RUST_GITIGNORE = """/target
Cargo.lock
"""

GODOT_GDEXTENSION = """[configuration]
entry_symbol = "gdext_rust_init"
compatibility_minimum = 4.1
reloadable = true

[libraries]
linux.debug.x86_64 = "res://../native/target/debug/librust.so"
linux.release.x86_64 = "res://../native/target/release/librust.so"
windows.debug.x86_64 = "res://../native/target/debug/rust.dll"
windows.release.x86_64 = "res://../native/target/release/rust.dll"
macos.debug = "res://../native/target/debug/librust.dylib"
macos.release = "res://../native/target/release/librust.dylib"
macos.debug.arm64 = "res://../native/target/debug/librust.dylib"
macos.release.arm64 = "res://../native/target/release/librust.dylib"
"""

PROJECT_DESCRIPTOR_TEMPLATE = '[application]\nconfig/name="{{ name }}-godot"\n'

LIB_RS = """use godot::prelude::*;

struct MyExtension;

#[gdextension]
unsafe impl ExtensionLibrary for MyExtension {}
"""

CARGO_TOML = """[package]
name = "rust"
version = "0.1.0"
edition = "2024"

[lib]
crate-type = ["cdylib"]

[dependencies]
godot = { git = "https://github.com/godot-rust/gdext" }

[profile.dev]
opt-level = 1
[profile.dev.package."*"]
opt-level = 1
"""

# Relative to the engine project directory.
PROTO_DIRECTORIES: tuple[str, ...] = (
    "entity",
    "player",
    "ui",
    "pipeline/aseprite/scripts",
    "pipeline/aseprite/src",
    "pipeline/aseprite/wizard",
    "pipeline/ldtk",
    "addons/AsepriteWizard",
    "addons/ldtk-importer",
)


def extension_manifest_name(template: ProjectTemplate) -> str:
    """Return the GDExtension manifest file name used by ``template``."""

    if template is ProjectTemplate.PROTO:
        return "rust.gdextension"
    return ".gdextension"
