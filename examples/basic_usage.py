#!/usr/bin/env python3
"""
Basic logadmin SDK usage example.

Runs the retention guard against an in-memory MockTransport, so no platform
is needed. Point LogAdminClient.from_env() at a real platform to do the same
thing for real.

Run with: python examples/basic_usage.py
"""

import logging

from logadmin import LogAdminClient, LogAdminError, RetentionGuardRejection, configure_logging
from logadmin.testing import MockTransport, create_mock_repository

configure_logging(level=logging.INFO)

print("=== logadmin SDK Basic Usage Example ===\n")

transport = MockTransport(username="example-user")
transport.add_repository(
    create_mock_repository(repo_id="logs-id", name="logs", retention_days=30.0, space_used=500)
)

with LogAdminClient(transport=transport) as client:
    print(f"Token belongs to: {client.viewer.username()}\n")

    # 1. Create an empty repository and give it limits
    print("1. Creating 'empty' and setting a 5 GB storage limit...")
    client.repositories.create("empty")
    client.repositories.update_storage_based_retention("empty", 5)
    print("   OK: empty repositories accept any limit\n")

    # 2. Narrowing retention on a repository that holds data
    print("2. Narrowing 'logs' from 30 to 10 days without consent...")
    try:
        client.repositories.update_time_based_retention("logs", 10)
    except RetentionGuardRejection as e:
        print(f"   Rejected: {e}")

    print("   Retrying with allow_data_deletion=True...")
    client.repositories.update_time_based_retention("logs", 10, allow_data_deletion=True)
    print("   OK\n")

    # 3. Clearing a limit is always allowed
    print("3. Clearing the ingest limit on 'logs'...")
    client.repositories.update_ingest_based_retention("logs", 0)
    print("   OK\n")

    # 4. Deleting
    print("4. Deleting repositories...")
    client.repositories.delete("empty", "cleanup")
    try:
        client.repositories.delete("logs", "cleanup")
    except LogAdminError as e:
        print(f"   'logs' kept: [{e.code}] {e.message}")

print("\nIssued operations:")
for call in transport.get_calls():
    print(f"   {call.operation} {call.variables}")
