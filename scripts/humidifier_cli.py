#!/usr/bin/env python3
"""Drive a step-only humidifier from the command line.

Discovers the remotes on the account, then optionally powers a humidifier
on and walks it to a target humidity.  Controller state is kept in a JSON
file between runs so the tracked position survives restarts.

Usage
-----
Set environment variables and run::

    export SWITCHBOT_TOKEN="..."
    python scripts/humidifier_cli.py --list
    python scripts/humidifier_cli.py --device 02-2021... --on --target 55

Options::

    --list               Print discovered remotes and exit
    --device ID          Humidifier to drive (default: first one found)
    --on / --off         Switch power before setting the target
    --target N           Target humidity (30-90, snapped to steps of 5)
    --state-file FILE    Where to keep controller state (default: .humistep-state.json)
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pyhumistep import ContextStore, HumidifierController, HumistepConfig, HumistepPlatform, SwitchBotClient  # noqa: E402


def _load_store(path: Path) -> ContextStore:
    if not path.is_file():
        return ContextStore()
    return ContextStore.load(json.loads(path.read_text(encoding="utf-8")))


def _save_store(path: Path, store: ContextStore) -> None:
    path.write_text(json.dumps(store.dump(), indent=2, ensure_ascii=False), encoding="utf-8")


async def main() -> int:
    parser = argparse.ArgumentParser(description="Set an absolute humidity on a step-only humidifier.")
    parser.add_argument("--list", action="store_true", help="Print discovered remotes and exit")
    parser.add_argument("--device", help="Humidifier device id (default: first humidifier found)")
    power = parser.add_mutually_exclusive_group()
    power.add_argument("--on", action="store_true", help="Power on before setting the target")
    power.add_argument("--off", action="store_true", help="Power off")
    parser.add_argument("--target", type=float, help="Target humidity in percent")
    parser.add_argument("--state-file", default=".humistep-state.json", help="Controller state file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    config = HumistepConfig.from_env()
    state_path = Path(args.state_file)
    store = _load_store(state_path)

    async with SwitchBotClient(config) as client:
        if args.list:
            devices = await client.get_devices()
            for device in devices.infrared_remote_list:
                print(f"{device.device_id}\t{device.remote_type}\t{device.device_name}")
            return 0

        platform = HumistepPlatform(config, client, store)
        controllers = await platform.discover_devices()
        humidifiers = {
            device_id: controller
            for device_id, controller in controllers.items()
            if isinstance(controller, HumidifierController)
        }
        if not humidifiers:
            print("No humidifier found", file=sys.stderr)
            return 1

        device_id = args.device or next(iter(humidifiers))
        humidifier = humidifiers.get(device_id)
        if humidifier is None:
            print(f"{device_id} is not a humidifier", file=sys.stderr)
            return 1

        try:
            if args.target is not None:
                await humidifier.set_target_humidity(args.target)
            if args.on or args.off:
                await humidifier.set_active(args.on)
            await humidifier.join()
        finally:
            await platform.aclose()
            _save_store(state_path, platform.store)

        state = humidifier.state
        print(
            f"{device_id}: active={state.active} target={state.target_humidity} position={state.internal_position}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
