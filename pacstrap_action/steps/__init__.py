from .step_10_write_config import WriteConfigStep
from .step_20_prepare_layout import PrepareLayoutStep
from .step_30_init_keyring import InitKeyringStep
from .step_40_install_packages import InstallPackagesStep
from .step_50_cleanup_config import CleanupConfigStep

__all__ = [
    "WriteConfigStep",
    "PrepareLayoutStep",
    "InitKeyringStep",
    "InstallPackagesStep",
    "CleanupConfigStep",
]
