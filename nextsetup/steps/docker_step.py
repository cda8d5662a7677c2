"""Dockerfile generation and standalone output for next.config.ts."""

import logging
from pathlib import Path
from typing import Any

from nextsetup import ui
from nextsetup.files import file_exists, read_file, write_file
from nextsetup.state import SetupSession
from nextsetup.steps.base import Severity, Step

logger = logging.getLogger(__name__)

NEXT_CONFIG_FILE = "next.config.ts"
NEXT_CONFIG_OPENING = "const nextConfig: NextConfig = {"
STANDALONE_OUTPUT = "  output: 'standalone',"

DOCKERFILE_CONTENT = """# syntax=docker.io/docker/dockerfile:1

FROM node:22-alpine AS base

# Install dependencies only when needed
FROM base AS deps
# Check https://github.com/nodejs/docker-node/tree/b4117f9333da4138b03a546ec926ef50a31506c3#nodealpine to understand why libc6-compat might be needed.
RUN apk add --no-cache libc6-compat
WORKDIR /app

# Install dependencies based on the preferred package manager
COPY package.json yarn.lock* package-lock.json* pnpm-lock.yaml* .npmrc* ./
RUN \\
  if [ -f yarn.lock ]; then yarn --frozen-lockfile; \\
  elif [ -f package-lock.json ]; then npm ci; \\
  elif [ -f pnpm-lock.yaml ]; then corepack enable pnpm && pnpm i --frozen-lockfile; \\
  else echo "Lockfile not found." && exit 1; \\
  fi


# Rebuild the source code only when needed
FROM base AS builder
WORKDIR /app
COPY --from=deps /app/node_modules ./node_modules
COPY . .

# Next.js collects completely anonymous telemetry data about general usage.
# Learn more here: https://nextjs.org/telemetry
# Uncomment the following line in case you want to disable telemetry during the build.
# ENV NEXT_TELEMETRY_DISABLED=1

RUN \\
  if [ -f yarn.lock ]; then yarn run build; \\
  elif [ -f package-lock.json ]; then npm run build; \\
  elif [ -f pnpm-lock.yaml ]; then corepack enable pnpm && pnpm run build; \\
  else echo "Lockfile not found." && exit 1; \\
  fi

# Production image, copy all the files and run next
FROM base AS runner
WORKDIR /app

ENV NODE_ENV=production
# Uncomment the following line in case you want to disable telemetry during runtime.
# ENV NEXT_TELEMETRY_DISABLED=1

RUN addgroup --system --gid 1001 nodejs
RUN adduser --system --uid 1001 nextjs

COPY --from=builder /app/public ./public

# Automatically leverage output traces to reduce image size
# https://nextjs.org/docs/advanced-features/output-file-tracing
COPY --from=builder --chown=nextjs:nodejs /app/.next/standalone ./
COPY --from=builder --chown=nextjs:nodejs /app/.next/static ./.next/static

USER nextjs

EXPOSE 3000

ENV PORT=3000

# server.js is created by next build from the standalone output
# https://nextjs.org/docs/pages/api-reference/config/next-config-js/output
ENV HOSTNAME="0.0.0.0"
CMD ["node", "server.js"]
"""

DOCKERIGNORE_CONTENT = """Dockerfile
.dockerignore
node_modules
npm-debug.log
README.md
.next
.git
"""


def add_standalone_output(config_text: str) -> str:
    """Insert output: 'standalone' after the config object's opening line.

    Text that already declares an output, or has no recognizable opening
    line, is returned unchanged.
    """
    if "output:" in config_text or NEXT_CONFIG_OPENING not in config_text:
        return config_text
    return config_text.replace(
        NEXT_CONFIG_OPENING, f"{NEXT_CONFIG_OPENING}\n{STANDALONE_OUTPUT}", 1
    )


def patch_next_config(path: Path) -> bool:
    """Enable standalone output in path/next.config.ts. Returns True if the file changed."""
    config_path = path / NEXT_CONFIG_FILE
    if not file_exists(config_path):
        logger.info("No %s in %s; standalone output not configured", NEXT_CONFIG_FILE, path)
        return False
    original = read_file(config_path)
    patched = add_standalone_output(original)
    if patched == original:
        return False
    write_file(config_path, patched)
    return True


def init(path: Path) -> None:
    ui.info("\nSetting Up Docker Configuration ...\n")

    write_file(path / "Dockerfile", DOCKERFILE_CONTENT)
    write_file(path / ".dockerignore", DOCKERIGNORE_CONTENT)
    patched = patch_next_config(path)

    ui.success("\nDocker setup completed!")
    ui.dim("  Created: Dockerfile")
    ui.dim("  Created: .dockerignore")
    if patched:
        ui.dim(f"  Updated: {NEXT_CONFIG_FILE} (standalone output)\n")


def run_docker_step(session: SetupSession, settings: dict[str, Any]) -> SetupSession:
    init(session.project_path)
    return session


STEP = Step(name="Docker", severity=Severity.BEST_EFFORT, run=run_docker_step)
