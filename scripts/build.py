#!/usr/bin/env python3
"""
Build script for the proxy Lambda functions.

Every function directory under src/ is zipped together with the shared
``service`` package into build/<function>.zip.
"""
import os
import shutil
import subprocess
import sys
import zipfile
from pathlib import Path
from typing import List

SHARED_PACKAGE = "service"
SKIPPED_DIRS = {SHARED_PACKAGE, "__pycache__"}


def discover_functions(src_dir: Path) -> List[Path]:
    """Function directories are the ones holding a lambda_function.py."""
    return sorted(
        d for d in src_dir.iterdir()
        if d.is_dir() and d.name not in SKIPPED_DIRS and (d / "lambda_function.py").exists()
    )


def build_function(function_dir: Path, src_dir: Path, build_dir: Path) -> Path:
    """Package one function and return the path of its zip archive."""
    function_name = function_dir.name
    zip_path = build_dir / f"{function_name}.zip"

    # Create temporary directory for packaging
    temp_dir = build_dir / f"temp_{function_name}"
    if temp_dir.exists():
        shutil.rmtree(temp_dir)
    temp_dir.mkdir()

    ignore = shutil.ignore_patterns("__pycache__", "*.pyc", "test_*.py")
    shutil.copytree(function_dir, temp_dir, dirs_exist_ok=True, ignore=ignore)
    shutil.copytree(src_dir / SHARED_PACKAGE, temp_dir / SHARED_PACKAGE, ignore=ignore)

    # Install dependencies if requirements.txt exists
    requirements_file = function_dir / "requirements.txt"
    if requirements_file.exists():
        print(f"Installing dependencies for {function_name}...")
        subprocess.run([
            sys.executable, "-m", "pip", "install",
            "-r", str(requirements_file),
            "-t", str(temp_dir),
        ], check=True)

    with zipfile.ZipFile(zip_path, 'w', zipfile.ZIP_DEFLATED) as zipf:
        for root, _, files in os.walk(temp_dir):
            for file in files:
                file_path = Path(root) / file
                arcname = file_path.relative_to(temp_dir)
                zipf.write(file_path, arcname)

    shutil.rmtree(temp_dir)
    return zip_path


def build(project_root: Path) -> List[Path]:
    src_dir = project_root / "src"
    build_dir = project_root / "build"
    build_dir.mkdir(exist_ok=True)

    functions = discover_functions(src_dir)
    print(f"Building Lambda functions: {[f.name for f in functions]}")

    archives = []
    for function_dir in functions:
        print(f"Building {function_dir.name}...")
        zip_path = build_function(function_dir, src_dir, build_dir)
        print(f"{zip_path.name} created ({zip_path.stat().st_size} bytes)")
        archives.append(zip_path)
    return archives


def main():
    """Main build function"""
    build(Path(__file__).parent.parent)
    print("Build complete!")


if __name__ == "__main__":
    main()
