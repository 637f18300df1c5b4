from omni_machines.cli import omni

omni(prog_name="omni-machines")
