import time

from goveekit import GoveeClient, PowerState

if __name__ == "__main__":
    # GOVEE_API_KEY is read from the environment or a .env file
    with GoveeClient.from_env() as client:
        devices = client.list_devices()
        for device in devices:
            print(repr(device))

        if not len(devices):
            raise SystemExit("No devices returned")

        first = devices[0]
        client.set_power(first, PowerState.ON)
        time.sleep(5)
        client.set_power(first, PowerState.OFF)
