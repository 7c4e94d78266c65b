"""
Latest-version lookup backed by the `modules` section of config.json

Config shape:
    "modules": {
        "example.com/mod": {
            "latest": "v1.2.0",
            "versions": ["v1.0.0", "v1.1.0", "v1.2.0"],
            "packages": ["example.com/mod", "example.com/mod/pkg"]
        }
    }
"""

import logging

logger = logging.getLogger("version_badge")


class ConfigResolver:
    """Answers "what is the latest version" from configured modules"""

    def __init__(self, modules: dict):
        self.modules = modules or {}

    def __call__(self, request, module_path: str, package_path: str) -> str:
        info = self.modules.get(module_path)
        if not isinstance(info, dict):
            logger.info(f"No latest version known for module {module_path}")
            return ""

        packages = info.get("packages")
        if packages and package_path not in packages:
            logger.info(f"Package {package_path} not found in module {module_path}")
            return ""

        latest = info.get("latest")
        if latest is None:
            return ""
        if not isinstance(latest, str):
            logger.info(f"Ignoring non-string latest version {latest!r} for module {module_path}")
            return ""
        return latest

    def find_module(self, package_path: str):
        """
        Longest configured module path containing `package_path`

        Matches whole path segments only, so "example.com/modx" is not
        inside "example.com/mod".

        Returns:
            str or None: Module path, or None if no module contains it
        """
        best = None
        for module_path in self.modules:
            if package_path == module_path or package_path.startswith(module_path + "/"):
                if best is None or len(module_path) > len(best):
                    best = module_path
        return best
