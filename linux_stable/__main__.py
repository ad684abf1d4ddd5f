from linux_stable.cli import main

main(prog_name="linux-stable")
