from podkit.config import Config
from podkit.details.errors import ClientRootNotSetError, UnrelatedRootsError
from podkit.details.relative_path import SRCROOT, relative_path_from
from podkit.details.sandbox import Sandbox
from podkit.details.target_definition import TargetDefinition
from podkit.details.targets.aggregate_target import (
    AggregateTarget,
    Installation,
    Integration,
)
from podkit.details.targets.pod_target import PodTarget
from podkit.details.targets.target import SupportFilesLocator, Target
from podkit.details.xcconfig import Xcconfig
