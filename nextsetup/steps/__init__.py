"""Setup wizard steps, in the order the wizard offers them."""

from nextsetup.steps import directory_step, docker_step, nextjs_step, prettier_step, shadcn_step
from nextsetup.steps.base import Severity, Step

DIRECTORY = directory_step.STEP
NEXTJS = nextjs_step.STEP
SHADCN = shadcn_step.STEP
PRETTIER = prettier_step.STEP
DOCKER = docker_step.STEP

__all__ = ["Severity", "Step", "DIRECTORY", "NEXTJS", "SHADCN", "PRETTIER", "DOCKER"]
