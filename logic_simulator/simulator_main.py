"""
Logic Simulator Orchestrator

Runs the talker on the in-process bus:
1. Instantiates Bus
2. Starts Talker
3. Listens on chatter / tf
4. Calls modifyTalkerMessage mid-run
"""

import logging
import sys
import time
from bus import default_bus
import messages
import talker

from beginner_tutorials.frequency import parse_frequency_arg
from beginner_tutorials.modify_service import SERVICE_NAME


def main(argv=None):
    argv = sys.argv if argv is None else argv
    logging.basicConfig(
        level=logging.DEBUG,
        format='[%(levelname)s] [%(name)s] %(message)s'
    )
    print("=== TALKER LOGIC SIMULATOR STARTING ===")

    frequency = parse_frequency_arg(argv[1]) if len(argv) > 1 else 10

    # 1. Components
    node = talker.Talker(default_bus, frequency)
    default_bus.subscribe('chatter', lambda msg: print(f"[LISTENER] I heard: [{msg.data}]"))
    default_bus.subscribe(talker.TF_TOPIC, lambda t: print(
        f"[TF] {t.header.frame_id} -> {t.child_frame_id} @ {t.header.stamp.to_float():.3f}"))

    node.start()

    try:
        time.sleep(1)
        print("\n>>> CALLING modifyTalkerMessage...")
        response = default_bus.call(SERVICE_NAME, messages.ModifyTalkerString.Request(input_str="hello"))
        print(f">>> modified_str: {response.modified_str}")
        time.sleep(1)
    except KeyboardInterrupt:
        print("Stopping...")
    finally:
        node.stop()

    print(f"=== SIMULATION ENDED. Published: {node.scheduler.count} ===")

if __name__ == "__main__":
    main()
