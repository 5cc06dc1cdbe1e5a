#!/usr/bin/env python3
"""
Startup script.
Runs alembic migrations, seeds the fixed extensions and starts uvicorn
with the application factory.
"""
import os
import sys
import subprocess

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def run_migrations():
    """Run alembic migrations"""
    print("Running database migrations...")
    result = subprocess.run(
        ['alembic', 'upgrade', 'head'],
        capture_output=True,
        text=True,
        cwd=BASE_DIR
    )
    if result.returncode == 0:
        print("Migrations completed successfully")
        if result.stdout:
            print(result.stdout)
    else:
        print(f"Migration failed: {result.stderr}")
        sys.exit(result.returncode)


def run_seed():
    """Insert the fixed extensions (idempotent)"""
    print("Seeding fixed extensions...")
    result = subprocess.run([sys.executable, '-m', 'app.seed'], cwd=BASE_DIR)
    if result.returncode != 0:
        print("Seed failed")
        sys.exit(result.returncode)


def start_uvicorn():
    """Start uvicorn server"""
    host = os.environ.get('HOST', '0.0.0.0')
    port = os.environ.get('PORT', '3000')
    print(f"Starting uvicorn on {host}:{port}")

    # exec substitui o processo atual, então SIGTERM chega direto no uvicorn
    os.chdir(BASE_DIR)
    os.execvp('uvicorn', [
        'uvicorn', 'app.main:create_app',
        '--factory',
        '--host', host,
        '--port', port
    ])


def main():
    run_migrations()
    run_seed()
    start_uvicorn()


if __name__ == '__main__':
    main()
