import os
import subprocess
import sys
import glob

def run_examples() -> int:
    example_files = sorted(glob.glob("examples/*.swg"))

    print(f"Running {len(example_files)} examples...\n")

    failures = 0
    for example_file in example_files:
        example_name = os.path.basename(example_file)
        print(f"--- Running {example_name} ---")

        result = subprocess.run(
            [sys.executable, "-m", "swinguage", example_file],
            capture_output=True,
            text=True,
            encoding='utf-8'
        )

        for line in result.stdout.splitlines():
            if line.startswith("Result:") or line.startswith("Error:"):
                print(line)

        if result.stderr:
            print(f"Error:\n{result.stderr}")
        if result.returncode != 0:
            failures += 1

        print()

    return 1 if failures else 0

if __name__ == "__main__":
    sys.exit(run_examples())
