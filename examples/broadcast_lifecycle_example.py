"""Example: Start a live broadcast, print its RTMP ingest URI, then end it.

Prerequisites:
    1. Install the package: pip install -e .
    2. Set environment variables in env.local (do not commit):
       IG_SESSION_ID=<sessionid cookie of a logged-in account>
       IG_USER_ID=<numeric user id of that account>
       IG_DEVICE_ID=<device uuid used when logging in>

Run:
    python examples/broadcast_lifecycle_example.py
"""

from ig_live import BroadcastService, HttpSessionClient, IngestReady
from ig_live.utils import init_logger


def main():
    init_logger()

    print("Live Broadcast Lifecycle Example")
    print("=" * 50)

    service = BroadcastService()

    with HttpSessionClient.from_config() as session:
        print("\n1. Starting broadcast:")
        result = service.start_broadcast(session)
        if not isinstance(result, IngestReady):
            print(f"   Failed: {result.errcode} ({result.erresid}) {result.errmesg}")
            if result.broadcast_id:
                print(f"   Cleaning up broadcast {result.broadcast_id}")
                service.end_broadcast(session, result.broadcast_id)
            return

        print(f"   Broadcast ID: {result.broadcast_id}")
        print(f"   Ingest URI:   {result.ingest_uri}")
        print(f"   Confirmed:    {result.start_confirmed}")

        input("\nPublish to the ingest URI, then press Enter to end the broadcast...")

        print("\n2. Ending broadcast:")
        ended = service.end_broadcast(session, result.broadcast_id)
        print(f"   Success: {ended.success}")


if __name__ == "__main__":
    main()
