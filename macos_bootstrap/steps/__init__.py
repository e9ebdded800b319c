from .step_10_xcode_clt import XcodeCLTStep
from .step_20_homebrew import HomebrewStep
from .step_30_formulas import FormulasStep
from .step_40_fonts import FontsStep
from .step_50_quicklook_plugins import QuickLookPluginsStep
from .step_60_apps import AppsStep
from .step_70_go_libraries import GoLibrariesStep
from .step_80_python_packages import PythonPackagesStep
from .step_85_ruby_gems import RubyGemsStep
from .step_90_nvm import NvmStep

__all__ = [
    "XcodeCLTStep",
    "HomebrewStep",
    "FormulasStep",
    "FontsStep",
    "QuickLookPluginsStep",
    "AppsStep",
    "GoLibrariesStep",
    "PythonPackagesStep",
    "RubyGemsStep",
    "NvmStep",
]
