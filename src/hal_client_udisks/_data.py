SPECS = {
    "org.freedesktop.DBus.ObjectManager": """
<interface name="org.freedesktop.DBus.ObjectManager">
    <method name="GetManagedObjects">
      <arg name="object_paths_interfaces_and_properties" type="a{oa{sa{sv}}}" direction="out" />
    </method>
  </interface>
""",
    "org.freedesktop.UDisks2.Drive": """
<interface name="org.freedesktop.UDisks2.Drive">
    <method name="Eject">
      <arg name="options" type="a{sv}" direction="in" />
    </method>
    <method name="PowerOff">
      <arg name="options" type="a{sv}" direction="in" />
    </method>
    <property name="Vendor" type="s" access="read" />
    <property name="Model" type="s" access="read" />
    <property name="Revision" type="s" access="read" />
    <property name="Serial" type="s" access="read" />
    <property name="WWN" type="s" access="read" />
    <property name="Id" type="s" access="read" />
    <property name="Media" type="s" access="read" />
    <property name="MediaCompatibility" type="as" access="read" />
    <property name="MediaRemovable" type="b" access="read" />
    <property name="MediaAvailable" type="b" access="read" />
    <property name="Size" type="t" access="read" />
    <property name="TimeDetected" type="t" access="read" />
    <property name="RotationRate" type="i" access="read" />
    <property name="ConnectionBus" type="s" access="read" />
    <property name="Seat" type="s" access="read" />
    <property name="Removable" type="b" access="read" />
    <property name="Ejectable" type="b" access="read" />
    <property name="SortKey" type="s" access="read" />
    <property name="CanPowerOff" type="b" access="read" />
    <property name="SiblingId" type="s" access="read" />
  </interface>
""",
    "org.freedesktop.UDisks2.Drive.Ata": """
<interface name="org.freedesktop.UDisks2.Drive.Ata">
    <method name="SmartUpdate">
      <arg name="options" type="a{sv}" direction="in" />
    </method>
    <property name="SmartSupported" type="b" access="read" />
    <property name="SmartEnabled" type="b" access="read" />
    <property name="SmartUpdated" type="t" access="read" />
    <property name="SmartFailing" type="b" access="read" />
    <property name="SmartPowerOnSeconds" type="t" access="read" />
    <property name="SmartTemperature" type="d" access="read" />
    <property name="SmartNumAttributesFailing" type="i" access="read" />
    <property name="SmartNumBadSectors" type="x" access="read" />
    <property name="SmartSelftestStatus" type="s" access="read" />
    <property name="PmSupported" type="b" access="read" />
    <property name="PmEnabled" type="b" access="read" />
    <property name="AamSupported" type="b" access="read" />
    <property name="WriteCacheSupported" type="b" access="read" />
    <property name="WriteCacheEnabled" type="b" access="read" />
  </interface>
""",
}
