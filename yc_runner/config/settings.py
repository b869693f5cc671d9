"""
Configuration settings for the runner action.

**Conceptual**: This module turns the raw string inputs of the workflow step
into strongly-typed, immutable configuration objects and validates them
before any VM is created or deleted. Every problem is reported at startup
with a clear message, never half-way through provisioning.

**Lifecycle**: construct once, validate once, read-only thereafter.

  1. ConfigLoader reads each input from an InputSource.
  2. Size inputs ("30Gb") and integer inputs ("2") are parsed.
  3. validate_config() checks the mode-dependent required inputs.
  4. Config bundles the validated ActionConfig with the GithubRepo.

**Usage pattern**:
  ```python
  from yc_runner.config.settings import Config, generate_unique_label

  config = Config.from_env()
  if config.input.mode == "start":
      label = generate_unique_label()
  ```
"""

import random
import string
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional

from yc_runner.config.errors import ConfigError
from yc_runner.config.github import GithubRepo
from yc_runner.config.inputs import EnvInputSource, InputSource
from yc_runner.utils.memory import parse_int, parse_memory


MODE_START = "start"
MODE_STOP = "stop"
MODES = (MODE_START, MODE_STOP)

# Defaults applied when an optional input is empty
DEFAULT_ZONE_ID = "ru-central1-a"
DEFAULT_PLATFORM_ID = "standard-v3"
DEFAULT_CORES = "2"
DEFAULT_MEMORY = "1Gb"
DEFAULT_DISK_TYPE = "network-ssd"
DEFAULT_DISK_SIZE = "30Gb"
DEFAULT_CORE_FRACTION = "100"

LABEL_LENGTH = 5
LABEL_ALPHABET = string.digits + string.ascii_lowercase


@dataclass(frozen=True)
class ResourcesSpec:
    """
    Compute resources requested for the runner VM.

    Attributes:
        memory: RAM in bytes.
        cores: Number of vCPUs.
        core_fraction: Guaranteed share of each vCPU in percent (e.g. 20, 50, 100).
    """
    memory: int
    cores: int
    core_fraction: int


@dataclass(frozen=True)
class ActionConfig:
    """
    Provisioning parameters read from the action inputs.

    **Conceptual**: A flat, immutable record. It is built by ConfigLoader and
    only becomes trustworthy after validate_config() accepts it.

    Attributes:
        image_id: Boot disk image (vm-image-id). Required for mode=start.
        mode: "start" to provision a runner VM, "stop" to delete one.
        github_token: Token used to register/unregister the runner.
        runner_home_dir: Directory of a preinstalled runner on the image ("" if none).
        label: Runner label. Required for mode=stop.
        subnet_id: VPC subnet for the VM's network interface. Required for mode=start.
        service_account_id: Service account attached to the VM ("" if none).
        disk_type: Boot disk type (default "network-ssd").
        disk_size: Boot disk size in bytes (default 30Gb).
        folder_id: Cloud folder the VM is created in.
        zone_id: Availability zone (default "ru-central1-a").
        platform_id: Hardware platform (default "standard-v3").
        resources_spec: Memory, cores and core fraction.
        instance_id: VM to delete. Only meaningful for mode=stop.
    """
    image_id: str
    mode: str
    github_token: str
    runner_home_dir: str
    label: str
    subnet_id: str
    service_account_id: str
    disk_type: str
    disk_size: int
    folder_id: str
    zone_id: str
    platform_id: str
    resources_spec: ResourcesSpec
    instance_id: Optional[str] = None

    def summary(self) -> Dict[str, Any]:
        """
        Return the config as a dict suitable for printing to the workflow log.

        The GitHub token is replaced with "***" (or "" when it was not given).
        """
        data = asdict(self)
        data["github_token"] = "***" if self.github_token else ""
        return data


def parse_inputs(inputs: InputSource) -> ActionConfig:
    """
    Read and parse all inputs.

    Returns:
        Populated (not yet validated) ActionConfig.

    Raises:
        MissingInputError: If a required input is empty.
        MalformedValueError: If a size or integer input does not parse.
    """
    get = inputs.get

    folder_id = get("folder-id", required=True)

    mode = get("mode")
    github_token = get("github-token")
    runner_home_dir = get("runner-home-dir")
    label = get("label")

    service_account_id = get("vm-service-account-id")

    image_id = get("vm-image-id", required=True)
    zone_id = get("vm-zone-id") or DEFAULT_ZONE_ID
    subnet_id = get("vm-subnet-id", required=True)
    platform_id = get("vm-platform-id") or DEFAULT_PLATFORM_ID
    cores = parse_int(get("vm-cores") or DEFAULT_CORES, "vm-cores")
    memory = parse_memory(get("vm-memory") or DEFAULT_MEMORY, "vm-memory")
    disk_type = get("vm-disk-type") or DEFAULT_DISK_TYPE
    disk_size = parse_memory(get("vm-disk-size") or DEFAULT_DISK_SIZE, "vm-disk-size")
    core_fraction = parse_int(
        get("vm-core-fraction") or DEFAULT_CORE_FRACTION, "vm-core-fraction"
    )

    instance_id = get("instance-id") or None

    return ActionConfig(
        image_id=image_id,
        mode=mode,
        github_token=github_token,
        runner_home_dir=runner_home_dir,
        label=label,
        subnet_id=subnet_id,
        service_account_id=service_account_id,
        disk_type=disk_type,
        disk_size=disk_size,
        folder_id=folder_id,
        zone_id=zone_id,
        platform_id=platform_id,
        resources_spec=ResourcesSpec(
            memory=memory,
            cores=cores,
            core_fraction=core_fraction,
        ),
        instance_id=instance_id,
    )


class ConfigLoader:
    """
    Reads the action inputs and assembles an ActionConfig.

    **Conceptual**: The loader depends only on the injected InputSource. It
    does not validate mode rules; call validate_config() (or use
    ConfigLoader.build()) for that.

    **Required inputs**: folder-id, vm-image-id and vm-subnet-id are looked up
    with required=True, so they fail the step even in mode=stop.
    """

    def __init__(self, inputs: InputSource, repository: GithubRepo):
        """
        Args:
            inputs: Where input values come from.
            repository: Repository the runner belongs to.
        """
        self.inputs = inputs
        self.repository = repository

    def load(self) -> ActionConfig:
        """Read and parse all inputs (see parse_inputs)."""
        return parse_inputs(self.inputs)

    def build(self) -> "Config":
        """Load, validate and bundle the inputs with the repository."""
        action_config = self.load()
        validate_config(action_config)
        return Config(input=action_config, github_context=self.repository)


def validate_config(config: ActionConfig) -> None:
    """
    Check the mode-dependent rules, in order.

      1. mode is set.
      2. github-token is set.
      3. mode=start needs vm-image-id and vm-subnet-id.
      4. mode=stop needs label and instance-id.
      5. Any other mode is rejected.

    Raises:
        ConfigError: On the first rule that fails.
    """
    if not config.mode:
        raise ConfigError("mode not specified: the 'mode' input is required")

    if not config.github_token:
        raise ConfigError("github-token not specified: the 'github-token' input is required")

    if config.mode == MODE_START:
        if not config.image_id or not config.subnet_id:
            raise ConfigError(
                "missing start-mode inputs: 'vm-image-id' and 'vm-subnet-id' are required"
            )
    elif config.mode == MODE_STOP:
        if not config.label or not config.instance_id:
            raise ConfigError(
                "missing stop-mode inputs: 'label' and 'instance-id' are required"
            )
    else:
        raise ConfigError(
            f"invalid mode: {config.mode!r}. Allowed values: {', '.join(MODES)}."
        )


@dataclass(frozen=True)
class Config:
    """
    Validated action configuration plus repository identity.

    Attributes:
        input: The validated ActionConfig.
        github_context: Owner/repo the runner is registered with.
    """
    input: ActionConfig
    github_context: GithubRepo

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Config":
        """
        Load and validate the configuration of the current workflow step.

        **Environment variables**:
          - INPUT_<NAME> for each action input (set by the GitHub runner).
          - GITHUB_REPOSITORY in "owner/repo" form.

        Args:
            env: Environment mapping (defaults to os.environ).

        Raises:
            ActionInputError: Any MissingInputError, MalformedValueError or
                ConfigError raised while loading or validating.
        """
        # Inputs first, so a missing input is reported before the repository
        action_config = parse_inputs(EnvInputSource(env))
        repository = GithubRepo.from_env(env)
        validate_config(action_config)
        return cls(input=action_config, github_context=repository)


def generate_unique_label() -> str:
    """
    Return a short random label such as "k3x9a" for tagging a runner.

    Five characters from 0-9a-z. Uses the module-level `random` generator,
    which is fine for uniqueness within one workflow run but is not
    suitable for secrets.
    """
    return "".join(random.choices(LABEL_ALPHABET, k=LABEL_LENGTH))
