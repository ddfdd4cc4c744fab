#!/usr/bin/env python3
"""
Start the Firestore and Auth emulators used by tests/integration.

Export the hosts printed below before running pytest, e.g.
    FIRESTORE_EMULATOR_HOST=localhost:8080 pytest tests/integration
"""
import os
import socket
import subprocess
import sys

PROJECT_ID = "demo-task-tracker"
PORTS = {
    "Firestore": 8080,
    "Auth": 9099,
    "Emulator Hub": 4400,
}


def port_in_use(host, port):
    """Check if a port is already in use."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.settimeout(1)
        return sock.connect_ex((host, port)) == 0


def firebase_cli_version():
    """Version string of the Firebase CLI, or None when it is not installed."""
    try:
        result = subprocess.run(["firebase", "--version"], capture_output=True, text=True, timeout=5)
    except (subprocess.TimeoutExpired, FileNotFoundError):
        return None
    return result.stdout.strip() if result.returncode == 0 else None


def start_emulators():
    busy = [f"{name} (port {port})" for name, port in PORTS.items() if port_in_use("localhost", port)]
    if busy:
        print("Emulator ports already in use: " + ", ".join(busy))
        return False

    print(f"FIRESTORE_EMULATOR_HOST=localhost:{PORTS['Firestore']}")
    print(f"FIREBASE_AUTH_EMULATOR_HOST=localhost:{PORTS['Auth']}")
    print("Press Ctrl+C to stop the emulators")

    try:
        subprocess.run(
            ["firebase", "emulators:start", "--only", "firestore,auth", "--project", PROJECT_ID],
            cwd=os.path.dirname(os.path.abspath(__file__)),
            check=True,
        )
    except KeyboardInterrupt:
        print("Emulators stopped.")
    except subprocess.CalledProcessError as e:
        print(f"Emulators exited with status {e.returncode}")
        return False

    return True


def main():
    version = firebase_cli_version()
    if version is None:
        print("Firebase CLI not found. Install it with: npm install -g firebase-tools")
        sys.exit(1)

    print(f"Firebase CLI {version}")
    sys.exit(0 if start_emulators() else 1)


if __name__ == "__main__":
    main()
