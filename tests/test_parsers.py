from host_status.services import parsers

SENSORS_OUTPUT = """\
asus-isa-0000
Adapter: ISA adapter
cpu_fan:        0 RPM
temp1:        +38.0°C

k10temp-pci-00c3
Adapter: PCI adapter
Tctl:         +52.6°C
temp1:        +45.0°C  (high = +70.0°C)

amdgpu-pci-0800
Adapter: PCI adapter
vddgfx:      1.06 V
edge:         +41.0°C  (crit = +100.0°C, hyst = -273.1°C)
junction:     +43.0°C

nvme-pci-0100
Adapter: PCI adapter
Composite:    +35.9°C  (low  = -273.1°C, high = +81.8°C)
"""

CORETEMP_OUTPUT = """\
coretemp-isa-0000
Adapter: ISA adapter
Package id 0:  +61.0°C  (high = +80.0°C, crit = +100.0°C)
Core 0:        +58.0°C  (high = +80.0°C, crit = +100.0°C)
"""


def test_parse_sensors_output_reads_all_three_chips():
    readings = parsers.parse_sensors_output(SENSORS_OUTPUT)

    assert readings.motherboard_temp == 38.0
    assert readings.cpu_temp == 45.0
    assert readings.gpu_temp == 41.0


def test_parse_sensors_output_k10temp_temp1_gives_cpu_temp():
    output = "k10temp-pci-00c3\nAdapter: PCI adapter\ntemp1:       +45.0°C\n"

    readings = parsers.parse_sensors_output(output)

    assert readings.cpu_temp == 45.0
    assert readings.motherboard_temp is None
    assert readings.gpu_temp is None


def test_parse_sensors_output_acpitz_counts_as_motherboard():
    output = "acpitz-acpi-0\nAdapter: ACPI interface\ntemp1:        +27.8°C\n"

    readings = parsers.parse_sensors_output(output)

    assert readings.motherboard_temp == 27.8
    assert readings.cpu_temp is None


def test_parse_sensors_output_ignores_labels_outside_matching_chip():
    # temp1 under an unknown chip must not be taken as CPU or board temp
    output = "nct6798-isa-0290\nAdapter: ISA adapter\ntemp1:        +30.0°C\n"

    readings = parsers.parse_sensors_output(output)

    assert readings.motherboard_temp is None
    assert readings.cpu_temp is None
    assert readings.gpu_temp is None


def test_parse_sensors_output_empty_and_garbage():
    assert parsers.parse_sensors_output("").cpu_temp is None

    output = "k10temp-pci-00c3\ntemp1:        N/A\n"
    assert parsers.parse_sensors_output(output).cpu_temp is None


def test_parse_temperature_token_variants():
    assert parsers.parse_temperature_token("temp1:  +45.0°C  (high = +70.0°C)") == 45.0
    assert parsers.parse_temperature_token("temp1:  -5.5°C") == -5.5
    assert parsers.parse_temperature_token("temp1:  45.0 C") is None
    assert parsers.parse_temperature_token("temp1:  +abc°C") is None


def test_parse_package_temperature():
    assert parsers.parse_package_temperature(CORETEMP_OUTPUT) == 61.0
    assert parsers.parse_package_temperature(SENSORS_OUTPUT) is None


def test_parse_ping_output():
    output = (
        "PING 8.8.8.8 (8.8.8.8) 56(84) bytes of data.\n"
        "64 bytes from 8.8.8.8: icmp_seq=1 ttl=55 time=13.4 ms\n"
        "\n"
        "--- 8.8.8.8 ping statistics ---\n"
        "1 packets transmitted, 1 received, 0% packet loss, time 0ms\n"
    )

    assert parsers.parse_ping_output(output) == 13.4


def test_parse_ping_output_without_reply():
    output = "1 packets transmitted, 0 received, 100% packet loss, time 0ms\n"

    assert parsers.parse_ping_output(output) is None
    assert parsers.parse_ping_output("bogus time=fast ms") is None


def test_parse_speedtest_output_both_rates():
    output = "Ping: 12.345 ms\nDownload: 93.12 Mbit/s\nUpload: 20.50 Mbit/s\n"

    assert parsers.parse_speedtest_output(output) == (93.12, 20.5)


def test_parse_speedtest_output_download_only_is_absent():
    output = "Ping: 12.345 ms\nDownload: 93.12 Mbit/s\n"

    assert parsers.parse_speedtest_output(output) is None


def test_parse_speedtest_output_unparseable_upload_is_absent():
    output = "Download: 93.12 Mbit/s\nUpload: n/a\n"

    assert parsers.parse_speedtest_output(output) is None
