import sys
import importlib.util

print(f"Python Version: {sys.version}")

def check_package(name):
    if importlib.util.find_spec(name):
        try:
            lib = importlib.import_module(name)
            print(f"SUCCESS: '{name}' is installed. Version: {getattr(lib, '__version__', 'unknown')}")
            return lib
        except ImportError as e:
            print(f"ERROR: '{name}' is installed but could not be imported. {e}")
    else:
        print(f"MISSING: '{name}' is NOT installed.")
    return None

yaml_lib = check_package("yaml")
pygame_lib = check_package("pygame")

if pygame_lib:
    try:
        pygame_lib.display.init()
        print(f"Pygame video driver: {pygame_lib.display.get_driver()}")
        pygame_lib.display.quit()
        print("Pygame display test PASSED! (--gui is available)")
    except Exception as e:
        print(f"Pygame display test FAILED: {e} (use the console front end)")
else:
    print("Skipping pygame display test; only the console front end will work.")
